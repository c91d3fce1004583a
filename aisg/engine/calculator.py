"""Core audit engine.

Takes one AuditSubmission + methodology config -> produces one immutable
AuditResult. Validation runs first; any error aborts the whole run.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from aisg.engine.action_plan import generate_action_plan, generate_ews
from aisg.engine.gaps import annotate_pillars
from aisg.engine.magic import generate_magic_section
from aisg.engine.prodem import recommend
from aisg.engine.profile import classify_profile
from aisg.engine.progress import track_quarter_progress
from aisg.engine.reality import calculate_reality_scores, resolve_level
from aisg.engine.report import (
    coaching_points,
    executive_summary,
    insight_lengkap,
    vision_alignment,
)
from aisg.engine.result import AuditReport, AuditResult
from aisg.engine.swot import synthesize_swot
from aisg.engine.validation import validate_submission
from aisg.engine.zones import classify_zones
from aisg.methodology.loader import get_default_methodology
from aisg.methodology.schema import MethodologyConfig
from aisg.models.submission import AuditSubmission

logger = logging.getLogger(__name__)


class AuditEngine:
    """Stateless engine that evaluates audit submissions."""

    def __init__(self, methodology: Optional[MethodologyConfig] = None):
        self._methodology = methodology

    @property
    def methodology(self) -> MethodologyConfig:
        if self._methodology is None:
            self._methodology = get_default_methodology()
        return self._methodology

    def evaluate(
        self,
        submission: AuditSubmission,
        as_of: Optional[date] = None,
    ) -> AuditResult:
        """Run the full pipeline for one submission.

        ``as_of`` only feeds the quarter progress section; every other field
        is a pure function of the submission and the methodology.
        """
        validate_submission(submission)
        config = self.methodology
        as_of = as_of or date.today()

        tier = resolve_level(submission, config)
        reality_scores = calculate_reality_scores(submission, config, tier)
        pillars = annotate_pillars(submission.self_scores(), reality_scores, config)

        total_self = sum(p.self_score for p in pillars)
        total_reality = sum(p.reality_score for p in pillars)
        total_gap = total_self - total_reality

        zones = classify_zones(pillars, config.zones)
        profile = classify_profile(zones.zona_kinerja, zones.zona_perilaku, total_gap)

        swot = synthesize_swot(submission, pillars, config)
        prodem = recommend(submission, config, tier, profile, zones)
        action_plan = generate_action_plan(submission, pillars, config)
        ews = generate_ews(submission, pillars, config)
        progress = track_quarter_progress(submission, tier, as_of)
        magic = generate_magic_section(submission, profile, pillars)

        report = AuditReport(
            executive_summary=executive_summary(
                submission, total_self, total_reality, zones, profile, prodem
            ),
            insight_lengkap=insight_lengkap(pillars),
            swot=swot,
            coaching_points=coaching_points(pillars),
            action_plan=action_plan,
            progress_kuartal=progress,
            ews=ews,
            kesesuaian_visi=vision_alignment(submission, zones),
        )

        logger.info(
            "Audit evaluated: %s (%s) reality=%d/90 zone=%s profile=%s prodem=%s",
            submission.nama,
            tier.code,
            total_reality,
            zones.zona_final.value,
            profile.value,
            prodem.recommendation.value,
        )

        return AuditResult(
            nama=submission.nama,
            jabatan=submission.jabatan,
            cabang=submission.cabang,
            tanggal_lahir=submission.tanggal_lahir,
            methodology_version=f"{config.id}@{config.version}",
            pillars=pillars,
            total_self_score=total_self,
            total_reality_score=total_reality,
            total_gap=total_gap,
            zones=zones,
            profil=profile,
            report=report,
            prodem=prodem,
            magic=magic,
        )


def evaluate(
    submission: AuditSubmission,
    as_of: Optional[date] = None,
    methodology: Optional[MethodologyConfig] = None,
) -> AuditResult:
    """Evaluate one submission with the given (or default) methodology."""
    return AuditEngine(methodology).evaluate(submission, as_of=as_of)
