from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Optional

# Subordinate role tiers, lowest to highest.
TIER_CODES = ("BC", "SBC", "BsM", "SBM", "EM", "SEM", "VBM", "BrM")

QUARTERS = ("Q1", "Q2", "Q3", "Q4")

BIRTH_DATE_FORMAT = "%d-%m-%Y"


def _freeze(obj, name: str) -> None:
    """Coerce a sequence attribute of a frozen dataclass to a tuple."""
    object.__setattr__(obj, name, tuple(getattr(obj, name)))


@dataclass(frozen=True)
class PillarSelfAnswer:
    pillar_id: int
    self_score: int


@dataclass(frozen=True)
class TeamMetrics:
    """Quarterly team results (Margin Tim and NA Tim), Q1..Q4."""

    margin: tuple[float, ...] = (0, 0, 0, 0)
    new_accounts: tuple[float, ...] = (0, 0, 0, 0)

    def __post_init__(self):
        _freeze(self, "margin")
        _freeze(self, "new_accounts")


@dataclass(frozen=True)
class PersonalMetrics:
    """Quarterly personal results. Negative values record withdrawals."""

    margin: tuple[float, ...] = (0, 0, 0, 0)
    new_clients: tuple[float, ...] = (0, 0, 0, 0)

    def __post_init__(self):
        _freeze(self, "margin")
        _freeze(self, "new_clients")


@dataclass(frozen=True)
class TeamStructure:
    """Snapshot of active direct subordinates per role tier."""

    bc: int = 0
    sbc: int = 0
    bsm: int = 0
    sbm: int = 0
    em: int = 0
    sem: int = 0
    vbm: int = 0
    brm: int = 0

    def count(self, tier_code: str) -> int:
        return getattr(self, tier_code.lower())

    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))

    def as_dict(self) -> dict[str, int]:
        return {code: self.count(code) for code in TIER_CODES}

    def highest_tier(self) -> Optional[str]:
        """Return the highest tier code with at least one subordinate."""
        for code in reversed(TIER_CODES):
            if self.count(code) > 0:
                return code
        return None


@dataclass(frozen=True)
class AuditSubmission:
    """One raw audit submission. Immutable input to the engine."""

    nama: str
    jabatan: str
    cabang: str
    tanggal_lahir: str  # DD-MM-YYYY
    team_metrics: TeamMetrics = field(default_factory=TeamMetrics)
    personal_metrics: PersonalMetrics = field(default_factory=PersonalMetrics)
    team_structure: TeamStructure = field(default_factory=TeamStructure)
    pillar_answers: tuple[PillarSelfAnswer, ...] = ()

    def __post_init__(self):
        _freeze(self, "pillar_answers")

    def series(self, name: str) -> tuple[float, ...]:
        """Return a quarterly series by metric name."""
        mapping = {
            "margin_tim": self.team_metrics.margin,
            "na_tim": self.team_metrics.new_accounts,
            "margin_pribadi": self.personal_metrics.margin,
            "nasabah_pribadi": self.personal_metrics.new_clients,
        }
        if name not in mapping:
            raise KeyError(f"Unknown quarterly series '{name}'")
        return mapping[name]

    def all_series(self) -> list[tuple[float, ...]]:
        return [
            self.team_metrics.margin,
            self.team_metrics.new_accounts,
            self.personal_metrics.margin,
            self.personal_metrics.new_clients,
        ]

    def reported_quarters(self) -> int:
        """Number of quarters up to the last one holding any non-zero value.

        Returns 0 for a new hire with no quarterly data at all.
        """
        last = 0
        for series in self.all_series():
            for i, value in enumerate(series):
                if value != 0:
                    last = max(last, i + 1)
        return last

    def is_new_hire(self) -> bool:
        return self.reported_quarters() == 0

    def birth_date(self) -> date:
        """Parse ``tanggal_lahir``. Raises ValueError when malformed."""
        return datetime.strptime(self.tanggal_lahir, BIRTH_DATE_FORMAT).date()

    def self_scores(self) -> dict[int, int]:
        return {a.pillar_id: a.self_score for a in self.pillar_answers}
