"""Pydantic models for the versioned 18 Pilar methodology configuration."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from aisg.errors import ConfigurationError
from aisg.models.enums import PillarCategory

PILLAR_COUNT = 18


def _require_registered(metric_id: str) -> None:
    # Import formulas to ensure registration has happened
    import aisg.metrics.formulas  # noqa: F401
    from aisg.metrics.registry import get_metric

    if get_metric(metric_id) is None:
        raise ValueError(f"Metric '{metric_id}' is not registered in the metric library")


class ScoringBreakpoints(BaseModel):
    """Lower bounds of the normalized ratio for reality scores 5..2."""

    score_5: float = Field(default=0.9, gt=0, le=1.0)
    score_4: float = Field(default=0.7, gt=0, le=1.0)
    score_3: float = Field(default=0.5, gt=0, le=1.0)
    score_2: float = Field(default=0.3, gt=0, le=1.0)

    @model_validator(mode="after")
    def strictly_descending(self) -> ScoringBreakpoints:
        if not (self.score_5 > self.score_4 > self.score_3 > self.score_2):
            raise ValueError(
                f"Breakpoints must be strictly descending: score_5 ({self.score_5}) > "
                f"score_4 ({self.score_4}) > score_3 ({self.score_3}) > score_2 ({self.score_2})"
            )
        return self

    def bucket(self, ratio: float) -> int:
        """Map a normalized ratio in [0, 1] to a 1..5 score."""
        if ratio >= self.score_5:
            return 5
        if ratio >= self.score_4:
            return 4
        if ratio >= self.score_3:
            return 3
        if ratio >= self.score_2:
            return 2
        return 1


class DampingConfig(BaseModel):
    """Self-report trust factors for behavioral pillars."""

    default: float = Field(default=0.8, gt=0, le=1.0)
    trusted: float = Field(default=1.0, gt=0, le=1.0)
    corroboration_threshold: float = Field(default=0.7, gt=0, le=1.0)

    @model_validator(mode="after")
    def default_le_trusted(self) -> DampingConfig:
        if self.default > self.trusted:
            raise ValueError(
                f"default damping ({self.default}) must not exceed trusted damping ({self.trusted})"
            )
        return self


class ZoneThresholds(BaseModel):
    """Zone cut-offs on the 0-90 scale."""

    success_min: float = Field(default=75, gt=0, le=90)
    critical_max: float = Field(default=50, ge=0, lt=90)

    @model_validator(mode="after")
    def critical_below_success(self) -> ZoneThresholds:
        if self.critical_max >= self.success_min:
            raise ValueError(
                f"critical_max ({self.critical_max}) must be below success_min ({self.success_min})"
            )
        return self


class PillarConfig(BaseModel):
    """Static definition of one of the 18 pillars."""

    id: int = Field(ge=1, le=PILLAR_COUNT)
    name: str
    category: PillarCategory
    metric: Optional[str] = Field(default=None, description="Metric id for metric-backed pillars")
    corroborated_by: Optional[str] = Field(
        default=None, description="Metric that lets a behavioral self-score be trusted"
    )
    focus: str = Field(description="Short phrase naming the competence, used in insights")
    activity: str = Field(description="Action plan activity for this pillar")
    risk: str = Field(description="EWS risk statement")
    quick_tip: str = Field(description="EWS short-term mitigation")

    @model_validator(mode="after")
    def metric_matches_category(self) -> PillarConfig:
        if self.category == PillarCategory.METRIC:
            if not self.metric:
                raise ValueError(f"Pillar {self.id} is metric-backed but names no metric")
            if self.corroborated_by:
                raise ValueError(f"Pillar {self.id}: corroborated_by applies to behavioral pillars only")
            _require_registered(self.metric)
        else:
            if self.metric:
                raise ValueError(f"Pillar {self.id} is behavioral but names metric '{self.metric}'")
            if self.corroborated_by:
                _require_registered(self.corroborated_by)
        return self

    @property
    def is_metric(self) -> bool:
        return self.category == PillarCategory.METRIC


class TeamMinimum(BaseModel):
    """Minimum active subordinates of one tier."""

    tier: str
    min_count: int = Field(ge=1)


class RoleTierConfig(BaseModel):
    """Targets and ProDem rules for one role tier (all targets per quarter)."""

    code: str
    name: str
    target_margin_tim: float = Field(ge=0)
    target_na_tim: float = Field(ge=0)
    target_margin_pribadi: float = Field(ge=0)
    target_nasabah_pribadi: float = Field(ge=0)
    target_team_size: float = Field(ge=0)
    promotion_requirements: list[TeamMinimum] = Field(default_factory=list)
    save_margin_pct: float = Field(default=70.0, gt=0, le=100)
    save_staff_min: int = Field(default=1, ge=0)

    def target(self, field_name: str) -> float:
        if field_name not in type(self).model_fields:
            raise ConfigurationError(f"Role tier '{self.code}' has no target '{field_name}'")
        return getattr(self, field_name)


class MethodologyConfig(BaseModel):
    """Top-level 18 Pilar methodology configuration."""

    id: str
    name: str
    version: str
    pillars: list[PillarConfig] = Field(min_length=PILLAR_COUNT, max_length=PILLAR_COUNT)
    role_tiers: list[RoleTierConfig] = Field(min_length=1)
    breakpoints: ScoringBreakpoints = Field(default_factory=ScoringBreakpoints)
    damping: DampingConfig = Field(default_factory=DampingConfig)
    zones: ZoneThresholds = Field(default_factory=ZoneThresholds)
    epsilon: float = Field(default=1e-6, gt=0)
    target_band: int = Field(default=4, ge=2, le=5)

    @field_validator("pillars")
    @classmethod
    def pillar_ids_are_permutation(cls, v: list[PillarConfig]) -> list[PillarConfig]:
        ids = sorted(p.id for p in v)
        if ids != list(range(1, PILLAR_COUNT + 1)):
            raise ValueError(f"Pillar ids must be exactly 1..{PILLAR_COUNT}, got {ids}")
        return v

    @model_validator(mode="after")
    def tiers_consistent(self) -> MethodologyConfig:
        codes = [t.code for t in self.role_tiers]
        if len(set(codes)) != len(codes):
            raise ValueError(f"Role tier codes must be unique, got {codes}")
        for i, tier in enumerate(self.role_tiers):
            for req in tier.promotion_requirements:
                if req.tier not in codes:
                    raise ValueError(
                        f"Tier '{tier.code}' promotion requirement names unknown tier '{req.tier}'"
                    )
                if codes.index(req.tier) > i:
                    raise ValueError(
                        f"Tier '{tier.code}' cannot require subordinates of higher tier '{req.tier}'"
                    )
        return self

    def pillar(self, pillar_id: int) -> PillarConfig:
        for p in self.pillars:
            if p.id == pillar_id:
                return p
        raise ConfigurationError(f"No pillar configuration for pillar {pillar_id}")

    def metric_pillars(self) -> list[PillarConfig]:
        return [p for p in self.pillars if p.is_metric]

    def behavioral_pillars(self) -> list[PillarConfig]:
        return [p for p in self.pillars if not p.is_metric]

    def tier(self, code: str) -> RoleTierConfig:
        for t in self.role_tiers:
            if t.code == code:
                return t
        raise ConfigurationError(f"No role tier configuration for '{code}'")

    def tier_codes(self) -> list[str]:
        return [t.code for t in self.role_tiers]

    def next_tier(self, code: str) -> Optional[RoleTierConfig]:
        codes = self.tier_codes()
        idx = codes.index(self.tier(code).code)
        return self.role_tiers[idx + 1] if idx + 1 < len(codes) else None

    def previous_tier(self, code: str) -> Optional[RoleTierConfig]:
        codes = self.tier_codes()
        idx = codes.index(self.tier(code).code)
        return self.role_tiers[idx - 1] if idx > 0 else None

    def match_tier(self, label: str) -> Optional[RoleTierConfig]:
        """Find a tier whose code or name matches a free-text position."""
        needle = label.strip().lower()
        if not needle:
            return None
        for t in self.role_tiers:
            if needle in (t.code.lower(), t.name.lower()):
                return t
        return None
