"""Regression tests for the 18 Pilar V1 calibration -- guards against scoring drift."""

import pytest


class TestPilar18V1Regression:
    """Pinned per-pillar reality vectors for the reference scenarios."""

    def _reality(self, engine, submission, as_of):
        return [p.reality_score for p in engine.evaluate(submission, as_of=as_of).pillars]

    def test_strong_sbc_vector(self, engine, strong_sbc, as_of):
        assert self._reality(engine, strong_sbc, as_of) == [5] * 12 + [4] * 6

    def test_at_risk_vector(self, engine, at_risk_sbc, as_of):
        assert self._reality(engine, at_risk_sbc, as_of) == [1, 1, 1, 1, 1, 2] + [2] * 12

    def test_performer_vector(self, engine, performer_sbc, as_of):
        expected = [1, 1, 1, 1, 1, 5] + [5, 5, 4, 4, 4, 4] + [4] * 6
        assert self._reality(engine, performer_sbc, as_of) == expected

    def test_new_hire_vector(self, engine, new_hire, as_of):
        assert self._reality(engine, new_hire, as_of) == [4] * 18

    @pytest.mark.parametrize(
        "fixture_name,total,zone,profile,recommendation",
        [
            ("strong_sbc", 84, "hijau", "Leader", "Promosi"),
            ("at_risk_sbc", 31, "merah", "At-Risk", "Demosi"),
            ("performer_sbc", 60, "kuning", "Performer", "Pembinaan"),
            ("new_hire", 72, "kuning", "At-Risk", "Dipertahankan"),
        ],
    )
    def test_headline_outcomes(self, engine, as_of, request, fixture_name, total, zone, profile, recommendation):
        result = engine.evaluate(request.getfixturevalue(fixture_name), as_of=as_of)
        assert result.total_reality_score == total
        assert result.zones.zona_final.value == zone
        assert result.profil.value == profile
        assert result.prodem.recommendation.value == recommendation

    def test_behavioral_subtotal_can_reach_success(self, engine, strong_sbc, as_of):
        """Corroborated pillars keep Leader reachable under default damping."""
        result = engine.evaluate(strong_sbc, as_of=as_of)
        assert result.zones.skor_perilaku >= 75
