"""SWOT Synthesizer.

Strengths: reality >= 4. Weaknesses: reality <= 2. Opportunities:
metric-backed pillars trending upward over the reported quarters, and
pillars the employee underestimates. Threats: reality <= 2 with a negative
quarter-over-quarter change, and any quarter of negative personal margin.
"""

from __future__ import annotations

from typing import Sequence

from aisg.engine.result import PillarAssessment, SWOTAnalysis, SWOTItem
from aisg.engine.trends import metric_trend
from aisg.methodology.schema import MethodologyConfig
from aisg.models.enums import GapClass
from aisg.models.submission import QUARTERS, AuditSubmission

STRENGTH_MIN = 4
WEAKNESS_MAX = 2


def synthesize_swot(
    submission: AuditSubmission,
    pillars: Sequence[PillarAssessment],
    config: MethodologyConfig,
) -> SWOTAnalysis:
    strength: list[SWOTItem] = []
    weakness: list[SWOTItem] = []
    opportunity: list[SWOTItem] = []
    threat: list[SWOTItem] = []

    for p in pillars:
        if p.reality_score >= STRENGTH_MIN:
            strength.append(
                SWOTItem(f"{p.pillar_name} kuat dengan skor realitas {p.reality_score}/5", p.pillar_name)
            )
        if p.reality_score <= WEAKNESS_MAX:
            weakness.append(
                SWOTItem(f"{p.pillar_name} lemah dengan skor realitas {p.reality_score}/5", p.pillar_name)
            )

        pillar_cfg = config.pillar(p.pillar_id)
        trend = metric_trend(pillar_cfg.metric, submission) if pillar_cfg.is_metric else None
        if trend is not None and trend.upward:
            opportunity.append(
                SWOTItem(
                    f"{p.pillar_name} tren naik dari {trend.values[0]:,.0f} ke "
                    f"{trend.values[-1]:,.0f} dalam {len(trend.values)} kuartal",
                    p.pillar_name,
                )
            )
        if p.gap_class == GapClass.UNDERESTIMATION:
            opportunity.append(
                SWOTItem(
                    f"Potensi tersembunyi pada {p.pillar_name}: realitas {p.reality_score}/5 "
                    f"di atas penilaian diri {p.self_score}/5",
                    p.pillar_name,
                )
            )
        if p.reality_score <= WEAKNESS_MAX and trend is not None and trend.declining:
            threat.append(
                SWOTItem(
                    f"{p.pillar_name} rendah dan turun {abs(trend.last_change):,.0f} pada kuartal terakhir",
                    p.pillar_name,
                )
            )

    for quarter, value in zip(QUARTERS, submission.personal_metrics.margin):
        if value < 0:
            threat.append(
                SWOTItem(
                    f"Margin pribadi {quarter} negatif ({value:,.0f}), indikasi penarikan dana nasabah",
                    "Margin Pribadi",
                )
            )

    return SWOTAnalysis(
        strength=tuple(strength),
        weakness=tuple(weakness),
        opportunity=tuple(opportunity),
        threat=tuple(threat),
    )
