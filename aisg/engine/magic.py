"""Magic Section Generator -- personalized, non-scoring narrative."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from aisg.engine.result import MagicSection, PillarAssessment
from aisg.models.enums import Generation, ProfileTag
from aisg.models.submission import AuditSubmission
from aisg.templates.magic import (
    ELEMENT_EPITHETS,
    GENERATION_BOOSTERS,
    GENERATION_CALLS,
    PROFILE_COACHING,
    PROFILE_NARRATIVES,
    PROFILE_QUOTES,
    PROFILE_TITLES,
    ZODIAC_TRAITS,
)

# (month, first day) each sign starts; earlier January dates are Capricorn.
_ZODIAC_STARTS = (
    (1, 20, "Aquarius"),
    (2, 19, "Pisces"),
    (3, 21, "Aries"),
    (4, 20, "Taurus"),
    (5, 21, "Gemini"),
    (6, 21, "Cancer"),
    (7, 23, "Leo"),
    (8, 23, "Virgo"),
    (9, 23, "Libra"),
    (10, 23, "Scorpio"),
    (11, 22, "Sagittarius"),
    (12, 22, "Capricorn"),
)

GEN_Z_FROM = 1997
MILLENNIAL_FROM = 1981
GEN_X_FROM = 1965


def zodiac_sign(day: int, month: int) -> str:
    sign = "Capricorn"
    for start_month, start_day, name in _ZODIAC_STARTS:
        if (month, day) >= (start_month, start_day):
            sign = name
    return sign


def generation_of(year: int) -> Generation:
    """Birth-year cohort; cohorts after Gen Z fold into Gen Z."""
    if year >= GEN_Z_FROM:
        return Generation.GEN_Z
    if year >= MILLENNIAL_FROM:
        return Generation.MILLENNIAL
    if year >= GEN_X_FROM:
        return Generation.GEN_X
    return Generation.BOOMER


def generate_magic_section(
    submission: AuditSubmission,
    profile: ProfileTag,
    pillars: Sequence[PillarAssessment],
) -> MagicSection:
    born: date = submission.birth_date()
    zodiak = zodiac_sign(born.day, born.month)
    generasi = generation_of(born.year)
    traits = ZODIAC_TRAITS[zodiak]

    strongest = max(pillars, key=lambda p: (p.reality_score, -p.pillar_id))
    weakest = min(pillars, key=lambda p: (p.reality_score, p.pillar_id))
    fmt = {
        "nama": submission.nama,
        "jabatan": submission.jabatan,
        "cabang": submission.cabang,
        "zodiak": zodiak,
        "trait": traits["trait"],
        "strongest": strongest.pillar_name,
        "weakest": weakest.pillar_name,
    }

    narasi = "\n\n".join(
        [
            PROFILE_NARRATIVES[profile].format(**fmt),
            f"Sebagai {zodiak} berelemen {traits['element']}, Anda {traits['trait']}. "
            f"Sifat ini adalah modal alami untuk menjawab tantangan kuartal ini.",
        ]
    )
    quotes = PROFILE_QUOTES[profile]

    return MagicSection(
        julukan=f"{PROFILE_TITLES[profile]} {ELEMENT_EPITHETS[traits['element']]}",
        narasi=narasi,
        zodiak=zodiak,
        generasi=generasi,
        zodiak_booster=GENERATION_BOOSTERS[generasi].format(**fmt),
        coaching_highlight=PROFILE_COACHING[profile].format(**fmt),
        call_to_action=GENERATION_CALLS[generasi].format(**fmt),
        quote=quotes[born.day % len(quotes)],
    )
