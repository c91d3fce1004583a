from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

# Global registry -- maps metric_id -> MetricDefinition
_REGISTRY: dict[str, MetricDefinition] = {}


@dataclass(frozen=True)
class MetricDefinition:
    """A quantitative proxy that can back a pillar's reality score."""

    id: str
    label: str
    description: str
    series: Optional[str]  # AuditSubmission quarterly series; None = team headcount
    target_field: str  # RoleTierConfig attribute used as the denominator
    formula_fn: Callable[..., float]
    trend: bool = True  # whether the series carries a quarter-over-quarter trend


def register_metric(
    metric_id: str,
    label: str,
    description: str,
    series: Optional[str],
    target_field: str,
    trend: bool = True,
) -> Callable:
    """Decorator to register a ratio function as a pillar metric."""

    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        definition = MetricDefinition(
            id=metric_id,
            label=label,
            description=description,
            series=series,
            target_field=target_field,
            formula_fn=fn,
            trend=trend and series is not None,
        )
        _REGISTRY[metric_id] = definition
        return fn

    return decorator


def get_metric(metric_id: str) -> Optional[MetricDefinition]:
    """Look up a metric definition by ID."""
    return _REGISTRY.get(metric_id)


def get_all_metrics() -> dict[str, MetricDefinition]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)
