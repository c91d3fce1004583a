"""Profile Classifier -- deterministic decision table."""

from __future__ import annotations

from aisg.models.enums import GapTendency, ProfileTag, Zone


def gap_tendency(total_gap: int) -> GapTendency:
    if total_gap > 0:
        return GapTendency.OVER
    if total_gap < 0:
        return GapTendency.UNDER
    return GapTendency.BALANCED


# (kinerja is success, perilaku is success, gap tendency) -> profile.
# Strong performance with soft behavior resolves to Visionary for every gap
# tendency, balanced and underestimating ties included.
_PROFILE_TABLE: dict[tuple[bool, bool, GapTendency], ProfileTag] = {}
for _tendency in GapTendency:
    _PROFILE_TABLE[(True, True, _tendency)] = ProfileTag.LEADER
    _PROFILE_TABLE[(True, False, _tendency)] = ProfileTag.VISIONARY
    _PROFILE_TABLE[(False, True, _tendency)] = ProfileTag.PERFORMER
    _PROFILE_TABLE[(False, False, _tendency)] = ProfileTag.AT_RISK


def classify_profile(zona_kinerja: Zone, zona_perilaku: Zone, total_gap: int) -> ProfileTag:
    key = (
        zona_kinerja == Zone.SUCCESS,
        zona_perilaku == Zone.SUCCESS,
        gap_tendency(total_gap),
    )
    return _PROFILE_TABLE[key]
