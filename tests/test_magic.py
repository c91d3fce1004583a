"""Tests for the Magic Section generator."""

import pytest

from aisg.engine.magic import generation_of, zodiac_sign
from aisg.models.enums import Generation, ProfileTag
from aisg.templates.magic import (
    GENERATION_BOOSTERS,
    PROFILE_NARRATIVES,
    PROFILE_QUOTES,
    ZODIAC_TRAITS,
)


class TestZodiac:
    @pytest.mark.parametrize(
        "day,month,expected",
        [
            (1, 1, "Capricorn"),
            (19, 1, "Capricorn"),
            (20, 1, "Aquarius"),
            (18, 2, "Aquarius"),
            (21, 3, "Aries"),
            (15, 8, "Leo"),
            (23, 8, "Virgo"),
            (21, 12, "Sagittarius"),
            (22, 12, "Capricorn"),
            (31, 12, "Capricorn"),
        ],
    )
    def test_cusps(self, day, month, expected):
        assert zodiac_sign(day, month) == expected

    def test_every_sign_has_traits(self):
        assert len(ZODIAC_TRAITS) == 12


class TestGeneration:
    @pytest.mark.parametrize(
        "year,expected",
        [
            (2010, Generation.GEN_Z),
            (1997, Generation.GEN_Z),
            (1996, Generation.MILLENNIAL),
            (1981, Generation.MILLENNIAL),
            (1980, Generation.GEN_X),
            (1965, Generation.GEN_X),
            (1964, Generation.BOOMER),
        ],
    )
    def test_cohorts(self, year, expected):
        assert generation_of(year) == expected


class TestMagicSection:
    def test_strong_sbc(self, engine, strong_sbc, as_of):
        magic = engine.evaluate(strong_sbc, as_of=as_of).magic
        assert magic.zodiak == "Leo"
        assert magic.generasi == Generation.MILLENNIAL
        assert magic.julukan == "Sang Nakhoda Berapi-api"
        assert "Rina Wijaya" in magic.narasi
        # born on the 15th -> second Leader quote
        assert magic.quote == PROFILE_QUOTES[ProfileTag.LEADER][1]

    def test_at_risk_capricorn_gen_x(self, engine, at_risk_sbc, as_of):
        magic = engine.evaluate(at_risk_sbc, as_of=as_of).magic
        assert magic.zodiak == "Capricorn"
        assert magic.generasi == Generation.GEN_X
        assert magic.julukan.startswith("Sang Petarung")

    def test_narrative_has_two_paragraphs(self, engine, performer_sbc, as_of):
        magic = engine.evaluate(performer_sbc, as_of=as_of).magic
        assert len(magic.narasi.split("\n\n")) == 2
        assert "Aries" in magic.narasi

    def test_all_fields_non_empty(self, engine, new_hire, as_of):
        magic = engine.evaluate(new_hire, as_of=as_of).magic
        for value in (
            magic.julukan,
            magic.narasi,
            magic.zodiak,
            magic.zodiak_booster,
            magic.coaching_highlight,
            magic.call_to_action,
            magic.quote,
        ):
            assert value

    def test_template_banks_cover_every_key(self):
        assert set(PROFILE_NARRATIVES) == set(ProfileTag)
        assert set(GENERATION_BOOSTERS) == set(Generation)
