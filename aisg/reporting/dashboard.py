"""Aggregate statistics over a collection of audit results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from aisg.engine.result import AuditResult
from aisg.models.enums import FinalZone, ProfileTag, Recommendation

RECENT_LIMIT = 3

_PENDING = (Recommendation.PROMOSI, Recommendation.DEMOSI)


@dataclass(frozen=True)
class RecentAudit:
    nama: str
    jabatan: str
    cabang: str
    zona_kinerja: str
    zona_perilaku: str
    zona_final: str


@dataclass(frozen=True)
class DashboardSummary:
    total_audits: int
    unique_employees: int
    zona_hijau_percentage: str  # one decimal, e.g. "66.7"
    pending_reviews: int  # Promosi or Demosi awaiting a decision
    profile_counts: dict[str, int]
    recent_audits: tuple[RecentAudit, ...]


def summarize_results(results: Sequence[AuditResult]) -> DashboardSummary:
    """Summarize results given oldest first; the last three are 'recent'."""
    total = len(results)
    employees = {(r.nama, r.tanggal_lahir) for r in results}
    hijau = sum(1 for r in results if r.zones.zona_final == FinalZone.HIJAU)
    pct = hijau / total * 100 if total else 0.0

    profile_counts = {tag.value: 0 for tag in ProfileTag}
    for r in results:
        profile_counts[r.profil.value] += 1

    recent = tuple(
        RecentAudit(
            nama=r.nama,
            jabatan=r.jabatan,
            cabang=r.cabang,
            zona_kinerja=r.zones.zona_kinerja.value,
            zona_perilaku=r.zones.zona_perilaku.value,
            zona_final=r.zones.zona_final.value,
        )
        for r in reversed(results[-RECENT_LIMIT:])
    )

    return DashboardSummary(
        total_audits=total,
        unique_employees=len(employees),
        zona_hijau_percentage=f"{pct:.1f}",
        pending_reviews=sum(1 for r in results if r.prodem.recommendation in _PENDING),
        profile_counts=profile_counts,
        recent_audits=recent,
    )
