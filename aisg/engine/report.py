"""Narrative sections of the audit report."""

from __future__ import annotations

from typing import Sequence

from aisg.engine.result import (
    PillarAssessment,
    ProDemRecommendation,
    VisionAlignment,
    ZoneSet,
)
from aisg.models.enums import FinalZone, GapClass, ProfileTag, VisionStatus
from aisg.models.submission import AuditSubmission

MAX_COACHING_POINTS = 5

_ZONE_LABELS = {
    FinalZone.HIJAU: "Zona Hijau",
    FinalZone.KUNING: "Zona Kuning",
    FinalZone.MERAH: "Zona Merah",
}

_VISION: dict[FinalZone, tuple[VisionStatus, str]] = {
    FinalZone.HIJAU: (
        VisionStatus.ALIGN,
        "Kinerja dan perilaku {nama} selaras dengan visi pertumbuhan perusahaan. "
        "Pertahankan standar ini dan jadilah contoh bagi tim.",
    ),
    FinalZone.KUNING: (
        VisionStatus.PERLU_PENYESUAIAN,
        "Arah {nama} sudah benar namun belum sepenuhnya selaras dengan visi perusahaan. "
        "Penyesuaian pada pilar terlemah akan mempercepat keselarasan.",
    ),
    FinalZone.MERAH: (
        VisionStatus.BELUM_SESUAI,
        "Kinerja dan perilaku {nama} saat ini belum sesuai dengan visi perusahaan. "
        "Diperlukan komitmen perbaikan yang terukur dalam 90 hari ke depan.",
    ),
}


def executive_summary(
    submission: AuditSubmission,
    total_self: int,
    total_reality: int,
    zones: ZoneSet,
    profile: ProfileTag,
    prodem: ProDemRecommendation,
) -> str:
    gap = total_self - total_reality
    if gap > 0:
        awareness = f"penilaian diri {gap} poin lebih tinggi dari realitas"
    elif gap < 0:
        awareness = f"penilaian diri {abs(gap)} poin lebih rendah dari realitas"
    else:
        awareness = "penilaian diri tepat sama dengan realitas"
    return (
        f"{submission.nama} ({submission.jabatan}, {submission.cabang}) memperoleh Reality Score "
        f"{total_reality}/90 dan Self Score {total_self}/90, dengan {awareness}. "
        f"Hasil akhir berada di {_ZONE_LABELS[zones.zona_final]} (kinerja {zones.zona_kinerja.value}, "
        f"perilaku {zones.zona_perilaku.value}) dengan profil {profile.value}. "
        f"Rekomendasi ProDem: {prodem.recommendation.value}."
    )


def insight_lengkap(pillars: Sequence[PillarAssessment]) -> str:
    return "\n".join(f"{p.pillar_id}. {p.insight}" for p in pillars)


def coaching_points(pillars: Sequence[PillarAssessment]) -> tuple[str, ...]:
    """Self-awareness gaps first, then the weakest pillars; never empty."""
    points: list[str] = []
    for p in pillars:
        if p.gap_class == GapClass.SIGNIFICANT_OVERESTIMATION:
            points.append(
                f"Kalibrasi persepsi diri pada {p.pillar_name}: klaim {p.self_score}/5 vs realitas {p.reality_score}/5."
            )
        elif p.gap_class == GapClass.UNDERESTIMATION:
            points.append(
                f"Bangun kepercayaan diri pada {p.pillar_name}: realitas {p.reality_score}/5 melebihi klaim {p.self_score}/5."
            )
    weakest = sorted(pillars, key=lambda p: (p.reality_score, p.pillar_id))
    for p in weakest:
        if len(points) >= MAX_COACHING_POINTS:
            break
        text = f"Tingkatkan {p.pillar_name} dari skor realitas {p.reality_score}/5."
        if p.reality_score < 5 and text not in points:
            points.append(text)
    if not points:
        points.append("Pertahankan seluruh pilar di skor maksimal dan bagikan praktik terbaik kepada tim.")
    return tuple(points[:MAX_COACHING_POINTS])


def vision_alignment(submission: AuditSubmission, zones: ZoneSet) -> VisionAlignment:
    status, template = _VISION[zones.zona_final]
    return VisionAlignment(status=status, narasi=template.format(nama=submission.nama))
