"""Action Plan (30/60/90) and Early-Warning-Signal generation."""

from __future__ import annotations

from typing import Sequence

from aisg.engine.result import ActionPlanItem, EWSEntry, PillarAssessment
from aisg.engine.trends import metric_trend
from aisg.metrics.registry import get_metric
from aisg.methodology.schema import MethodologyConfig
from aisg.models.enums import PillarCategory
from aisg.models.submission import AuditSubmission

HORIZONS = ("30 Hari", "60 Hari", "90 Hari")
EWS_BEHAVIORAL_MAX = 2


def focus_pillars(pillars: Sequence[PillarAssessment], count: int = len(HORIZONS)) -> list[PillarAssessment]:
    """Lowest reality first; larger overestimation, then lower id, breaks ties."""
    return sorted(pillars, key=lambda p: (p.reality_score, -p.gap, p.pillar_id))[:count]


def _target_text(horizon: int, p: PillarAssessment, target_band: int) -> tuple[str, int]:
    if horizon == 0:
        return f"Stabilkan {p.pillar_name} minimal di skor {p.reality_score}/5", p.reality_score
    if horizon == 1:
        score = min(p.reality_score + 1, 5)
        return f"Naikkan {p.pillar_name} satu band ke {score}/5", score
    score = max(target_band, p.reality_score)
    if p.reality_score >= target_band:
        return f"Pertahankan {p.pillar_name} di band target {score}/5", score
    return f"Capai band target {score}/5 pada {p.pillar_name}", score


def generate_action_plan(
    submission: AuditSubmission,
    pillars: Sequence[PillarAssessment],
    config: MethodologyConfig,
) -> tuple[ActionPlanItem, ...]:
    items: list[ActionPlanItem] = []
    for horizon, (periode, p) in enumerate(zip(HORIZONS, focus_pillars(pillars))):
        pillar_cfg = config.pillar(p.pillar_id)
        target, score = _target_text(horizon, p, config.target_band)
        if p.category == PillarCategory.METRIC:
            pic = f"{submission.nama} bersama atasan langsung"
            evidence = f"laporan {get_metric(pillar_cfg.metric).label} kuartalan"
        else:
            pic = submission.nama
            evidence = "catatan observasi atasan"
        items.append(
            ActionPlanItem(
                periode=periode,
                target=target,
                aktivitas=pillar_cfg.activity,
                pic=pic,
                output=f"Skor realitas {p.pillar_name} {score}/5 pada audit berikutnya, dibuktikan {evidence}",
                pillar_id=p.pillar_id,
            )
        )
    return tuple(items)


def generate_ews(
    submission: AuditSubmission,
    pillars: Sequence[PillarAssessment],
    config: MethodologyConfig,
) -> tuple[EWSEntry, ...]:
    """One entry per pillar crossing a risk threshold.

    Behavioral pillars at reality <= 2, and metric-backed pillars whose
    series declined across the last two reported quarters.
    """
    entries: list[EWSEntry] = []
    for p in pillars:
        pillar_cfg = config.pillar(p.pillar_id)
        if p.category == PillarCategory.BEHAVIORAL:
            if p.reality_score > EWS_BEHAVIORAL_MAX:
                continue
            indikator = f"Skor realitas {p.reality_score}/5 (klaim diri {p.self_score}/5)"
        else:
            trend = metric_trend(pillar_cfg.metric, submission)
            if trend is None or not trend.declining:
                continue
            label = get_metric(pillar_cfg.metric).label
            indikator = (
                f"{label} turun dari {trend.values[-2]:,.0f} ke {trend.values[-1]:,.0f} "
                f"dalam 2 kuartal terakhir"
            )
        entries.append(
            EWSEntry(
                faktor=p.pillar_name,
                indikator=indikator,
                risiko=pillar_cfg.risk,
                saran_cepat=pillar_cfg.quick_tip,
            )
        )
    return tuple(entries)
