"""ProDem Recommendation Engine.

Four terminal states, evaluated in order: Promosi, Demosi, Pembinaan,
Dipertahankan. Every requirement is evaluated and reported regardless of
which state fires.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from aisg.engine.result import ProDemRecommendation, Requirement, ZoneSet
from aisg.methodology.schema import MethodologyConfig, RoleTierConfig
from aisg.models.enums import FinalZone, ProfileTag, Recommendation, StrategyType
from aisg.models.submission import AuditSubmission

logger = logging.getLogger(__name__)

PROMOTION_MARGIN_PCT = 100.0

_TEXTS: dict[Recommendation, dict[str, str]] = {
    Recommendation.PROMOSI: {
        "reason": (
            "Profil {profil} dengan realisasi margin {pct:.1f}% dari target dan seluruh "
            "syarat struktur {next_level} terpenuhi."
        ),
        "konsekuensi": "Naik ke jenjang {next_level} dengan target dan tanggung jawab tim yang lebih besar.",
        "next_step": "Ajukan berkas promosi ke {next_level} dan siapkan rencana 90 hari jenjang baru.",
    },
    Recommendation.DEMOSI: {
        "reason": (
            "Profil {profil} di zona merah dengan realisasi margin {pct:.1f}% dan tidak ada "
            "syarat save (margin maupun staff) yang terpenuhi."
        ),
        "konsekuensi": "Jenjang turun{to_level} dan target disesuaikan dengan kapasitas saat ini.",
        "next_step": "Diskusikan hasil audit dengan atasan langsung dan susun rencana pemulihan kinerja.",
    },
    Recommendation.PEMBINAAN: {
        "reason": (
            "Profil {profil} dengan setidaknya satu syarat save terpenuhi; strategi {strategy} "
            "paling dekat untuk mempertahankan jenjang {current_level}."
        ),
        "konsekuensi": "Jenjang {current_level} dipertahankan dengan program pembinaan terpantau.",
        "next_step": "Jalankan program pembinaan 90 hari dengan fokus {strategy} dan evaluasi bulanan.",
    },
    Recommendation.DIPERTAHANKAN: {
        "reason": (
            "Profil {profil} belum memenuhi kriteria promosi maupun demosi; realisasi margin "
            "{pct:.1f}% dari target."
        ),
        "konsekuensi": "Tetap di jenjang {current_level} dengan target kuartal berjalan.",
        "next_step": "Fokus pada action plan 30/60/90 untuk memenuhi syarat jenjang berikutnya.",
    },
}


@dataclass(frozen=True)
class _SaveCheck:
    strategy: StrategyType
    met: bool
    progress: float  # share of the save threshold reached


def margin_realization(submission: AuditSubmission, tier: RoleTierConfig) -> float:
    """Team margin of the latest reported quarter as % of the quarterly target.

    0 when no quarter has been reported or the target is zero.
    """
    quarters = submission.reported_quarters()
    if quarters == 0 or tier.target_margin_tim <= 0:
        return 0.0
    value = submission.team_metrics.margin[quarters - 1]
    return round(value / tier.target_margin_tim * 100, 1)


def _save_checks(pct: float, headcount: int, tier: RoleTierConfig) -> tuple[_SaveCheck, _SaveCheck]:
    margin_progress = pct / tier.save_margin_pct
    if tier.save_staff_min > 0:
        staff_progress = headcount / tier.save_staff_min
    else:
        staff_progress = 1.0
    return (
        _SaveCheck(StrategyType.SAVE_BY_MARGIN, pct >= tier.save_margin_pct, margin_progress),
        _SaveCheck(StrategyType.SAVE_BY_STAFF, headcount >= tier.save_staff_min, staff_progress),
    )


def build_requirements(
    submission: AuditSubmission,
    tier: RoleTierConfig,
    next_tier: Optional[RoleTierConfig],
    pct: float,
) -> tuple[Requirement, ...]:
    """Full eligibility picture: promotion margin, next-tier minimums, save rules."""
    headcount = submission.team_structure.total()
    requirements = [
        Requirement(
            label="Realisasi margin kuartal >= 100% target",
            value=f"{pct:.1f}% dari target {tier.target_margin_tim:,.0f}",
            met=pct >= PROMOTION_MARGIN_PCT,
        )
    ]
    if next_tier is not None:
        for minimum in next_tier.promotion_requirements:
            count = submission.team_structure.count(minimum.tier)
            requirements.append(
                Requirement(
                    label=f"Minimal {minimum.min_count} {minimum.tier} aktif (syarat {next_tier.code})",
                    value=f"{count} {minimum.tier}",
                    met=count >= minimum.min_count,
                )
            )
    by_margin, by_staff = _save_checks(pct, headcount, tier)
    requirements.append(
        Requirement(
            label=f"Save by Margin: realisasi >= {tier.save_margin_pct:.0f}% target",
            value=f"{pct:.1f}%",
            met=by_margin.met,
        )
    )
    requirements.append(
        Requirement(
            label=f"Save by Staff: minimal {tier.save_staff_min} staff aktif",
            value=f"{headcount} staff",
            met=by_staff.met,
        )
    )
    return tuple(requirements)


def recommend(
    submission: AuditSubmission,
    config: MethodologyConfig,
    tier: RoleTierConfig,
    profile: ProfileTag,
    zones: ZoneSet,
) -> ProDemRecommendation:
    next_tier = config.next_tier(tier.code)
    previous_tier = config.previous_tier(tier.code)
    pct = margin_realization(submission, tier)
    headcount = submission.team_structure.total()
    requirements = build_requirements(submission, tier, next_tier, pct)
    by_margin, by_staff = _save_checks(pct, headcount, tier)

    structure_met = next_tier is not None and all(
        submission.team_structure.count(m.tier) >= m.min_count
        for m in next_tier.promotion_requirements
    )
    any_save = by_margin.met or by_staff.met

    strategy = StrategyType.NOT_APPLICABLE
    next_level: Optional[str] = None
    if profile == ProfileTag.LEADER and pct >= PROMOTION_MARGIN_PCT and structure_met:
        recommendation = Recommendation.PROMOSI
        next_level = next_tier.code
    elif (
        profile == ProfileTag.AT_RISK
        and zones.zona_final == FinalZone.MERAH
        and not any_save
    ):
        recommendation = Recommendation.DEMOSI
        next_level = previous_tier.code if previous_tier is not None else None
    elif profile in (ProfileTag.PERFORMER, ProfileTag.AT_RISK) and any_save:
        recommendation = Recommendation.PEMBINAAN
        if by_margin.progress >= by_staff.progress:
            strategy = StrategyType.SAVE_BY_MARGIN
        else:
            strategy = StrategyType.SAVE_BY_STAFF
    else:
        recommendation = Recommendation.DIPERTAHANKAN

    texts = _TEXTS[recommendation]
    fmt = {
        "profil": profile.value,
        "pct": pct,
        "next_level": next_level or "-",
        "current_level": tier.code,
        "strategy": strategy.value,
        "to_level": f" ke {next_level}" if next_level else "",
    }
    logger.debug("ProDem for %s: %s (tier %s, margin %.1f%%)", submission.nama, recommendation.value, tier.code, pct)
    return ProDemRecommendation(
        current_level=tier.code,
        recommendation=recommendation,
        next_level=next_level,
        reason=texts["reason"].format(**fmt),
        konsekuensi=texts["konsekuensi"].format(**fmt),
        next_step=texts["next_step"].format(**fmt),
        strategy_type=strategy,
        requirements=requirements,
    )
