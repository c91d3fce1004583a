"""Compare two audits of the same employee."""

from __future__ import annotations

from dataclasses import dataclass

from aisg.engine.result import AuditResult
from aisg.errors import ValidationError
from aisg.models.enums import FinalZone, ProfileTag, Recommendation, TrendLabel


@dataclass(frozen=True)
class PillarDelta:
    pillar_id: int
    pillar_name: str
    previous: int
    current: int

    @property
    def delta(self) -> int:
        return self.current - self.previous


@dataclass(frozen=True)
class Transition:
    previous: str
    current: str

    @property
    def changed(self) -> bool:
        return self.previous != self.current


@dataclass(frozen=True)
class AuditComparison:
    nama: str
    pillar_deltas: tuple[PillarDelta, ...]
    total_previous: int
    total_current: int
    zona_final: Transition
    profil: Transition
    rekomendasi: Transition
    trend: TrendLabel

    @property
    def total_delta(self) -> int:
        return self.total_current - self.total_previous

    def improved_pillars(self) -> list[PillarDelta]:
        return [d for d in self.pillar_deltas if d.delta > 0]

    def declined_pillars(self) -> list[PillarDelta]:
        return [d for d in self.pillar_deltas if d.delta < 0]


def _trend(delta: int) -> TrendLabel:
    if delta > 0:
        return TrendLabel.NAIK
    if delta < 0:
        return TrendLabel.TURUN
    return TrendLabel.STABIL


def _transition(
    previous: FinalZone | ProfileTag | Recommendation,
    current: FinalZone | ProfileTag | Recommendation,
) -> Transition:
    return Transition(previous=previous.value, current=current.value)


def compare_results(previous: AuditResult, current: AuditResult) -> AuditComparison:
    """Pillar-by-pillar reality deltas plus zone/profile/ProDem transitions.

    Both results must belong to the same employee (matched on name and
    birth date).
    """
    if (previous.nama, previous.tanggal_lahir) != (current.nama, current.tanggal_lahir):
        raise ValidationError(
            "current",
            f"cannot compare audits of different employees "
            f"('{previous.nama}' vs '{current.nama}')",
        )

    deltas: list[PillarDelta] = []
    for p in current.pillars:
        try:
            before = previous.pillar(p.pillar_id)
        except KeyError:
            raise ValidationError(
                "previous", f"pillar {p.pillar_id} missing from previous audit"
            ) from None
        deltas.append(
            PillarDelta(
                pillar_id=p.pillar_id,
                pillar_name=p.pillar_name,
                previous=before.reality_score,
                current=p.reality_score,
            )
        )

    total_delta = current.total_reality_score - previous.total_reality_score
    return AuditComparison(
        nama=current.nama,
        pillar_deltas=tuple(deltas),
        total_previous=previous.total_reality_score,
        total_current=current.total_reality_score,
        zona_final=_transition(previous.zones.zona_final, current.zones.zona_final),
        profil=_transition(previous.profil, current.profil),
        rekomendasi=_transition(previous.prodem.recommendation, current.prodem.recommendation),
        trend=_trend(total_delta),
    )
