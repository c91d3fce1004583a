"""Tests for the submission data model helpers."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from aisg.models.submission import (
    AuditSubmission,
    PersonalMetrics,
    TeamMetrics,
    TeamStructure,
)


class TestTeamStructure:
    def test_total_sums_every_tier(self):
        ts = TeamStructure(bc=4, sbc=1, em=2)
        assert ts.total() == 7

    def test_count_is_case_insensitive_on_code(self):
        ts = TeamStructure(bsm=3)
        assert ts.count("BsM") == 3

    def test_highest_tier(self):
        assert TeamStructure(bc=5, sbm=1).highest_tier() == "SBM"
        assert TeamStructure().highest_tier() is None

    def test_as_dict_keys_follow_tier_order(self):
        assert list(TeamStructure().as_dict()) == ["BC", "SBC", "BsM", "SBM", "EM", "SEM", "VBM", "BrM"]


class TestAuditSubmission:
    def test_sequences_are_frozen_to_tuples(self, strong_sbc):
        metrics = TeamMetrics(margin=[1, 2, 3, 4], new_accounts=[0, 0, 0, 0])
        assert metrics.margin == (1, 2, 3, 4)
        assert isinstance(strong_sbc.pillar_answers, tuple)

    def test_submission_is_immutable(self, strong_sbc):
        with pytest.raises(FrozenInstanceError):
            strong_sbc.nama = "Someone Else"

    def test_reported_quarters_counts_up_to_last_non_zero(self):
        sub = AuditSubmission(
            nama="X",
            jabatan="BC",
            cabang="Y",
            tanggal_lahir="01-01-1990",
            team_metrics=TeamMetrics(margin=(100, 0, 0, 0)),
            personal_metrics=PersonalMetrics(new_clients=(0, 0, 1, 0)),
        )
        assert sub.reported_quarters() == 3

    def test_negative_personal_value_counts_as_reported(self):
        sub = AuditSubmission(
            nama="X",
            jabatan="BC",
            cabang="Y",
            tanggal_lahir="01-01-1990",
            personal_metrics=PersonalMetrics(margin=(0, -50, 0, 0)),
        )
        assert sub.reported_quarters() == 2
        assert not sub.is_new_hire()

    def test_new_hire_has_no_reported_quarters(self, new_hire):
        assert new_hire.reported_quarters() == 0
        assert new_hire.is_new_hire()

    def test_series_lookup(self, strong_sbc):
        assert strong_sbc.series("na_tim") == (5, 6, 6, 7)
        with pytest.raises(KeyError):
            strong_sbc.series("omzet")

    def test_birth_date_parses_day_first(self, strong_sbc):
        assert strong_sbc.birth_date() == date(1990, 8, 15)

    def test_self_scores_maps_pillar_to_score(self, at_risk_sbc):
        scores = at_risk_sbc.self_scores()
        assert scores[1] == 4
        assert scores[18] == 2
        assert len(scores) == 18
