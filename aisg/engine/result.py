"""Immutable result data structures produced by one engine run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from aisg.models.enums import (
    FinalZone,
    GapClass,
    Generation,
    PillarCategory,
    ProfileTag,
    Recommendation,
    StrategyType,
    VisionStatus,
    Zone,
)


@dataclass(frozen=True)
class PillarAssessment:
    """Self vs reality comparison for a single pillar."""

    pillar_id: int
    pillar_name: str
    category: PillarCategory
    self_score: int
    reality_score: int
    gap: int
    gap_class: GapClass
    insight: str
    metric_ratio: Optional[float] = None  # normalized [0, 1] ratio when metric-driven
    damping: Optional[float] = None  # damping applied when behavioral formula used


@dataclass(frozen=True)
class ZoneSet:
    zona_kinerja: Zone
    zona_perilaku: Zone
    zona_final: FinalZone
    skor_kinerja: float  # metric-backed subtotal scaled to 0-90
    skor_perilaku: float  # behavioral subtotal scaled to 0-90


@dataclass(frozen=True)
class SWOTItem:
    text: str
    source: str  # contributing pillar name or metric label


@dataclass(frozen=True)
class SWOTAnalysis:
    strength: tuple[SWOTItem, ...]
    weakness: tuple[SWOTItem, ...]
    opportunity: tuple[SWOTItem, ...]
    threat: tuple[SWOTItem, ...]


@dataclass(frozen=True)
class Requirement:
    label: str
    value: str
    met: bool


@dataclass(frozen=True)
class ProDemRecommendation:
    current_level: str
    recommendation: Recommendation
    next_level: Optional[str]
    reason: str
    konsekuensi: str
    next_step: str
    strategy_type: StrategyType
    requirements: tuple[Requirement, ...]


@dataclass(frozen=True)
class ActionPlanItem:
    periode: str
    target: str
    aktivitas: str
    pic: str
    output: str
    pillar_id: int


@dataclass(frozen=True)
class EWSEntry:
    faktor: str
    indikator: str
    risiko: str
    saran_cepat: str


@dataclass(frozen=True)
class QuarterProgress:
    kuartal_berjalan: str
    sisa_hari: int
    target_margin: float
    realisasi_margin: float
    percentage_margin: float
    target_na: float
    realisasi_na: float
    percentage_na: float
    catatan: str


@dataclass(frozen=True)
class MagicSection:
    julukan: str
    narasi: str
    zodiak: str
    generasi: Generation
    zodiak_booster: str
    coaching_highlight: str
    call_to_action: str
    quote: str


@dataclass(frozen=True)
class VisionAlignment:
    status: VisionStatus
    narasi: str


@dataclass(frozen=True)
class AuditReport:
    """The multi-section audit report body."""

    executive_summary: str
    insight_lengkap: str
    swot: SWOTAnalysis
    coaching_points: tuple[str, ...]
    action_plan: tuple[ActionPlanItem, ...]
    progress_kuartal: QuarterProgress
    ews: tuple[EWSEntry, ...]
    kesesuaian_visi: VisionAlignment


@dataclass(frozen=True)
class AuditResult:
    """Top-level result of one evaluation. Never mutated after creation."""

    nama: str
    jabatan: str
    cabang: str
    tanggal_lahir: str
    methodology_version: str
    pillars: tuple[PillarAssessment, ...]
    total_self_score: int
    total_reality_score: int
    total_gap: int
    zones: ZoneSet
    profil: ProfileTag
    report: AuditReport
    prodem: ProDemRecommendation
    magic: MagicSection

    def pillar(self, pillar_id: int) -> PillarAssessment:
        for p in self.pillars:
            if p.pillar_id == pillar_id:
                return p
        raise KeyError(pillar_id)
