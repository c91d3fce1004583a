"""Reality Score Calculator.

Derives an objective 1-5 score per pillar. Metric-backed pillars are
normalized against the employee's role-tier target and bucketed by the
configured breakpoints; behavioral pillars apply a self-report damping
factor. A new hire with no quarterly data gets the behavioral formula for
every pillar.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

# Ensure all metrics are registered on import
import aisg.metrics.formulas  # noqa: F401
from aisg.errors import ConfigurationError
from aisg.methodology.schema import MethodologyConfig, RoleTierConfig
from aisg.metrics.registry import get_metric
from aisg.models.submission import TIER_CODES, AuditSubmission

logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass(frozen=True)
class RealityScore:
    pillar_id: int
    reality_score: int
    metric_ratio: Optional[float] = None
    damping: Optional[float] = None


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp_score(value: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, value))


def behavioral_score(self_score: int, damping: float) -> int:
    """round(self_score x damping), clamped to 1..5."""
    return clamp_score(round_half_up(self_score * damping))


def resolve_level(submission: AuditSubmission, config: MethodologyConfig) -> RoleTierConfig:
    """Determine the employee's current role tier.

    The position text wins when it names a configured tier; otherwise the
    level is one tier above the highest subordinate tier in the team
    snapshot (the bottom tier when there is no team).
    """
    tier = config.match_tier(submission.jabatan)
    if tier is not None:
        return tier

    highest = submission.team_structure.highest_tier()
    if highest is None:
        code = TIER_CODES[0]
    else:
        idx = TIER_CODES.index(highest)
        code = TIER_CODES[min(idx + 1, len(TIER_CODES) - 1)]
    logger.debug("Position %r not a known tier; inferred %s from team structure", submission.jabatan, code)
    return config.tier(code)


def read_metric(
    metric_id: str,
    submission: AuditSubmission,
    tier: RoleTierConfig,
    config: MethodologyConfig,
) -> float:
    """Evaluate a registered metric over the reported quarters, clamped to [0, 1]."""
    definition = get_metric(metric_id)
    if definition is None:
        raise ConfigurationError(f"Metric '{metric_id}' not found in registry")

    if definition.series is not None:
        quarters = submission.reported_quarters()
        values = tuple(submission.series(definition.series)[:quarters])
    else:
        values = (submission.team_structure.total(),)

    target = tier.target(definition.target_field)
    raw = definition.formula_fn(values=values, target=target, epsilon=config.epsilon)
    return max(0.0, min(1.0, raw))


def calculate_reality_scores(
    submission: AuditSubmission,
    config: MethodologyConfig,
    tier: RoleTierConfig,
) -> list[RealityScore]:
    """Return one RealityScore per configured pillar, ordered by pillar id."""
    self_scores = submission.self_scores()
    new_hire = submission.is_new_hire()
    ratios: dict[str, float] = {}

    def ratio_of(metric_id: str) -> float:
        if metric_id not in ratios:
            ratios[metric_id] = read_metric(metric_id, submission, tier, config)
        return ratios[metric_id]

    scores: list[RealityScore] = []
    for pillar in sorted(config.pillars, key=lambda p: p.id):
        if pillar.id not in self_scores:
            raise ConfigurationError(f"Pillar {pillar.id} has no matching self answer")
        self_score = self_scores[pillar.id]

        if new_hire:
            damping = config.damping.default
            scores.append(
                RealityScore(pillar.id, behavioral_score(self_score, damping), damping=damping)
            )
            continue

        if pillar.is_metric:
            r = ratio_of(pillar.metric)
            scores.append(
                RealityScore(pillar.id, config.breakpoints.bucket(r), metric_ratio=r)
            )
            continue

        damping = config.damping.default
        ratio: Optional[float] = None
        if pillar.corroborated_by:
            ratio = ratio_of(pillar.corroborated_by)
            if ratio >= config.damping.corroboration_threshold:
                damping = config.damping.trusted
        scores.append(
            RealityScore(
                pillar.id,
                behavioral_score(self_score, damping),
                metric_ratio=ratio,
                damping=damping,
            )
        )

    logger.debug(
        "Reality scores for %s (tier %s, new_hire=%s): %s",
        submission.nama,
        tier.code,
        new_hire,
        [s.reality_score for s in scores],
    )
    return scores
