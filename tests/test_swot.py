"""Tests for SWOT synthesis."""

from dataclasses import replace

from aisg.models.submission import PersonalMetrics


class TestSWOT:
    def test_strong_sbc_strengths_cover_every_pillar(self, engine, strong_sbc, as_of):
        swot = engine.evaluate(strong_sbc, as_of=as_of).report.swot
        assert len(swot.strength) == 18
        assert swot.weakness == ()
        assert swot.threat == ()

    def test_upward_trends_are_opportunities(self, engine, strong_sbc, as_of):
        swot = engine.evaluate(strong_sbc, as_of=as_of).report.swot
        sources = {item.source for item in swot.opportunity}
        assert sources == {
            "Pencapaian Margin Tim",
            "Pertumbuhan New Account Tim",
            "Produktivitas Margin Pribadi",
            "Akuisisi Nasabah Pribadi",
        }

    def test_at_risk_weaknesses_and_threats(self, engine, at_risk_sbc, as_of):
        swot = engine.evaluate(at_risk_sbc, as_of=as_of).report.swot
        assert len(swot.weakness) == 18
        assert swot.strength == ()
        assert swot.opportunity == ()
        assert [item.source for item in swot.threat] == [
            "Pencapaian Margin Tim",
            "Margin Pribadi",
        ]
        assert "Q3" in swot.threat[-1].text

    def test_underestimated_pillar_is_opportunity(self, engine, performer_sbc, as_of):
        swot = engine.evaluate(performer_sbc, as_of=as_of).report.swot
        assert any(
            item.source == "Pengembangan Struktur Tim" and "Potensi" in item.text
            for item in swot.opportunity
        )

    def test_every_negative_personal_quarter_is_a_threat(self, engine, strong_sbc, as_of):
        sub = replace(strong_sbc, personal_metrics=PersonalMetrics(margin=(-100, 500, -50, 0), new_clients=(3, 3, 4, 4)))
        swot = engine.evaluate(sub, as_of=as_of).report.swot
        negative = [item for item in swot.threat if item.source == "Margin Pribadi"]
        assert len(negative) == 2

    def test_items_carry_text_and_source(self, engine, at_risk_sbc, as_of):
        swot = engine.evaluate(at_risk_sbc, as_of=as_of).report.swot
        for bucket in (swot.strength, swot.weakness, swot.opportunity, swot.threat):
            for item in bucket:
                assert item.text
                assert item.source
