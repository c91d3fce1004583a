"""Zone Classifier -- aggregates reality scores into zone buckets."""

from __future__ import annotations

from typing import Sequence

from aisg.engine.result import PillarAssessment, ZoneSet
from aisg.methodology.schema import ZoneThresholds
from aisg.models.enums import FinalZone, PillarCategory, Zone

MAX_TOTAL = 90
MAX_PILLAR_SCORE = 5

_FINAL_BY_ZONE = {
    Zone.SUCCESS: FinalZone.HIJAU,
    Zone.WARNING: FinalZone.KUNING,
    Zone.CRITICAL: FinalZone.MERAH,
}


def classify_score(score: float, thresholds: ZoneThresholds) -> Zone:
    """Bucket a 0-90 score. Total: every score lands in exactly one zone.

    >= success_min -> success; > critical_max -> warning; else critical.
    """
    if score >= thresholds.success_min:
        return Zone.SUCCESS
    if score > thresholds.critical_max:
        return Zone.WARNING
    return Zone.CRITICAL


def classify_final(total_reality_score: float, thresholds: ZoneThresholds) -> FinalZone:
    """hijau (>=75), kuning (51-74), merah (<=50) with default thresholds."""
    return _FINAL_BY_ZONE[classify_score(total_reality_score, thresholds)]


def scaled_subtotal(pillars: Sequence[PillarAssessment]) -> float:
    """Scale a subset's reality subtotal to the 0-90 range."""
    if not pillars:
        return 0.0
    subtotal = sum(p.reality_score for p in pillars)
    return subtotal * MAX_TOTAL / (MAX_PILLAR_SCORE * len(pillars))


def classify_zones(
    pillars: Sequence[PillarAssessment],
    thresholds: ZoneThresholds,
) -> ZoneSet:
    metric = [p for p in pillars if p.category == PillarCategory.METRIC]
    behavioral = [p for p in pillars if p.category == PillarCategory.BEHAVIORAL]
    skor_kinerja = round(scaled_subtotal(metric), 2)
    skor_perilaku = round(scaled_subtotal(behavioral), 2)
    total = sum(p.reality_score for p in pillars)
    return ZoneSet(
        zona_kinerja=classify_score(skor_kinerja, thresholds),
        zona_perilaku=classify_score(skor_perilaku, thresholds),
        zona_final=classify_final(total, thresholds),
        skor_kinerja=skor_kinerja,
        skor_perilaku=skor_perilaku,
    )
