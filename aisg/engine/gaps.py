"""Gap & Insight Annotator."""

from __future__ import annotations

from aisg.engine.reality import RealityScore
from aisg.engine.result import PillarAssessment
from aisg.errors import ConfigurationError
from aisg.methodology.schema import MethodologyConfig, PillarConfig
from aisg.models.enums import GapClass
from aisg.templates.insights import INSIGHT_TEMPLATES


def classify_gap(gap: int) -> GapClass:
    """Classify self minus reality.

    >= 2 -> significant overestimation
       1 -> mild overestimation
       0 -> accurate self-awareness
    <= -1 -> underestimation (a coaching opportunity, never a fault)
    """
    if gap >= 2:
        return GapClass.SIGNIFICANT_OVERESTIMATION
    if gap == 1:
        return GapClass.MILD_OVERESTIMATION
    if gap == 0:
        return GapClass.ACCURATE
    return GapClass.UNDERESTIMATION


def build_insight(pillar: PillarConfig, self_score: int, reality_score: int) -> str:
    gap = self_score - reality_score
    gap_class = classify_gap(gap)
    template = INSIGHT_TEMPLATES.get((pillar.category, gap_class))
    if template is None:
        raise ConfigurationError(
            f"No insight template for ({pillar.category.value}, {gap_class.value})"
        )
    return template.format(
        pillar=pillar.name,
        focus=pillar.focus,
        self_score=self_score,
        reality_score=reality_score,
        gap_abs=abs(gap),
    )


def annotate_pillars(
    self_scores: dict[int, int],
    reality_scores: list[RealityScore],
    config: MethodologyConfig,
) -> tuple[PillarAssessment, ...]:
    """Combine self and reality scores into PillarAssessments."""
    assessments: list[PillarAssessment] = []
    for rs in reality_scores:
        pillar = config.pillar(rs.pillar_id)
        self_score = self_scores[rs.pillar_id]
        gap = self_score - rs.reality_score
        assessments.append(
            PillarAssessment(
                pillar_id=pillar.id,
                pillar_name=pillar.name,
                category=pillar.category,
                self_score=self_score,
                reality_score=rs.reality_score,
                gap=gap,
                gap_class=classify_gap(gap),
                insight=build_insight(pillar, self_score, rs.reality_score),
                metric_ratio=rs.metric_ratio,
                damping=rs.damping,
            )
        )
    return tuple(assessments)
