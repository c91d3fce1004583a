"""Audit hooks: logs evaluations for the audit trail."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from aisg.engine.result import AuditResult
from aisg.models.submission import AuditSubmission

logger = logging.getLogger(__name__)


def log_evaluation(
    submission: AuditSubmission,
    result: AuditResult,
) -> dict[str, Any]:
    """Record one engine evaluation in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "nama": submission.nama,
        "jabatan": submission.jabatan,
        "cabang": submission.cabang,
        "methodology_version": result.methodology_version,
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "total_reality_score": result.total_reality_score,
        "zona_final": result.zones.zona_final.value,
        "profil": result.profil.value,
        "recommendation": result.prodem.recommendation.value,
    }
    logger.info(
        "Evaluation audit: %s (%s) → %s / %s",
        submission.nama,
        submission.cabang,
        entry["zona_final"],
        entry["recommendation"],
    )
    return entry
