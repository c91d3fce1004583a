"""Metric ratio implementations for the metric-backed pillars.

Each function is a pure calculation with no side effects. ``values`` holds
the reported quarters of one series (or a single headcount), ``target`` is
the role tier's per-quarter target. Results are raw ratios; the reality
calculator clamps them to [0, 1] before bucketing.
"""

from __future__ import annotations

from typing import Sequence

from aisg.metrics.registry import register_metric

DEFAULT_EPSILON = 1e-6


def _denominator(target: float, epsilon: float) -> float:
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    return max(target, epsilon)


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


@register_metric(
    metric_id="margin_tim",
    label="Margin Tim",
    description="Average quarterly team margin against the tier's quarterly margin target.",
    series="margin_tim",
    target_field="target_margin_tim",
)
def calc_margin_tim(
    values: Sequence[float],
    target: float,
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """avg(margin_tim) / target_margin_tim"""
    return _mean(values) / _denominator(target, epsilon)


@register_metric(
    metric_id="na_tim",
    label="New Account Tim",
    description="Average quarterly team new accounts against the tier's NA target.",
    series="na_tim",
    target_field="target_na_tim",
)
def calc_na_tim(
    values: Sequence[float],
    target: float,
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """avg(na_tim) / target_na_tim"""
    return _mean(values) / _denominator(target, epsilon)


@register_metric(
    metric_id="margin_pribadi",
    label="Margin Pribadi",
    description="Average quarterly personal margin against the tier's personal target.",
    series="margin_pribadi",
    target_field="target_margin_pribadi",
)
def calc_margin_pribadi(
    values: Sequence[float],
    target: float,
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """avg(margin_pribadi) / target_margin_pribadi (negative when net withdrawal)"""
    return _mean(values) / _denominator(target, epsilon)


@register_metric(
    metric_id="nasabah_pribadi",
    label="Nasabah Pribadi",
    description="Average quarterly personal new clients against the tier's target.",
    series="nasabah_pribadi",
    target_field="target_nasabah_pribadi",
)
def calc_nasabah_pribadi(
    values: Sequence[float],
    target: float,
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """avg(nasabah_pribadi) / target_nasabah_pribadi"""
    return _mean(values) / _denominator(target, epsilon)


@register_metric(
    metric_id="konsistensi_margin",
    label="Konsistensi Margin",
    description="Share of reported quarters in which team margin met the quarterly target.",
    series="margin_tim",
    target_field="target_margin_tim",
    trend=False,  # raw series already trends under margin_tim
)
def calc_konsistensi_margin(
    values: Sequence[float],
    target: float,
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """count(q >= target) / reported quarters"""
    if not values:
        return 0.0
    threshold = _denominator(target, epsilon)
    hits = sum(1 for v in values if v >= threshold)
    return hits / len(values)


@register_metric(
    metric_id="struktur_tim",
    label="Struktur Tim",
    description="Active direct subordinates against the tier's team-size target.",
    series=None,
    target_field="target_team_size",
)
def calc_struktur_tim(
    values: Sequence[float],
    target: float,
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """headcount / target_team_size"""
    return sum(values) / _denominator(target, epsilon)
