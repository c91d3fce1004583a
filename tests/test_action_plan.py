"""Tests for the 30/60/90 action plan and early warning signals."""

from dataclasses import replace

from aisg.engine.action_plan import HORIZONS, focus_pillars
from aisg.models.submission import TeamMetrics


class TestFocusPillars:
    def test_lowest_reality_first_then_largest_gap(self, engine, at_risk_sbc, as_of):
        result = engine.evaluate(at_risk_sbc, as_of=as_of)
        assert [p.pillar_id for p in focus_pillars(result.pillars)] == [1, 2, 3]

    def test_ties_broken_by_pillar_id(self, engine, new_hire, as_of):
        result = engine.evaluate(new_hire, as_of=as_of)
        assert [p.pillar_id for p in focus_pillars(result.pillars)] == [1, 2, 3]


class TestActionPlan:
    def test_one_item_per_horizon(self, engine, strong_sbc, as_of):
        plan = engine.evaluate(strong_sbc, as_of=as_of).report.action_plan
        assert tuple(item.periode for item in plan) == HORIZONS

    def test_strong_sbc_targets_weakest_behavioral_pillars(self, engine, strong_sbc, as_of):
        plan = engine.evaluate(strong_sbc, as_of=as_of).report.action_plan
        assert [item.pillar_id for item in plan] == [13, 14, 15]
        assert all(item.pic == "Rina Wijaya" for item in plan)

    def test_metric_pillars_pair_with_supervisor(self, engine, at_risk_sbc, as_of):
        plan = engine.evaluate(at_risk_sbc, as_of=as_of).report.action_plan
        assert all(item.pic == "Budi Santoso bersama atasan langsung" for item in plan)
        assert "laporan Margin Tim" in plan[0].output

    def test_activity_comes_from_pillar_config(self, engine, at_risk_sbc, as_of, v1_config):
        plan = engine.evaluate(at_risk_sbc, as_of=as_of).report.action_plan
        assert plan[0].aktivitas == v1_config.pillar(1).activity

    def test_targets_escalate_toward_band(self, engine, at_risk_sbc, as_of):
        plan = engine.evaluate(at_risk_sbc, as_of=as_of).report.action_plan
        assert "1/5" in plan[0].target
        assert "2/5" in plan[1].target
        assert "4/5" in plan[2].target

    def test_fields_never_empty(self, engine, performer_sbc, as_of):
        for item in engine.evaluate(performer_sbc, as_of=as_of).report.action_plan:
            assert item.target and item.aktivitas and item.pic and item.output


class TestEarlyWarningSignals:
    def test_strong_sbc_has_no_warnings(self, engine, strong_sbc, as_of):
        assert engine.evaluate(strong_sbc, as_of=as_of).report.ews == ()

    def test_at_risk_warnings(self, engine, at_risk_sbc, as_of):
        ews = engine.evaluate(at_risk_sbc, as_of=as_of).report.ews
        factors = [entry.faktor for entry in ews]
        # the declining team margin plus all twelve behavioral pillars at 2
        assert len(ews) == 13
        assert factors[0] == "Pencapaian Margin Tim"
        assert "Konsistensi Target Kuartalan" not in factors
        assert "turun dari 1,000 ke 500" in ews[0].indikator

    def test_entries_carry_config_risk_and_tip(self, engine, at_risk_sbc, as_of, v1_config):
        ews = engine.evaluate(at_risk_sbc, as_of=as_of).report.ews
        kepemimpinan = next(e for e in ews if e.faktor == "Kepemimpinan")
        assert kepemimpinan.risiko == v1_config.pillar(7).risk
        assert kepemimpinan.saran_cepat == v1_config.pillar(7).quick_tip

    def test_decline_in_last_quarter_triggers_warning(self, engine, strong_sbc, as_of):
        sub = replace(strong_sbc, team_metrics=TeamMetrics(margin=(12_000, 12_000, 12_000, 11_000), new_accounts=(5, 6, 6, 7)))
        factors = [e.faktor for e in engine.evaluate(sub, as_of=as_of).report.ews]
        assert "Pencapaian Margin Tim" in factors

    def test_new_hire_has_no_metric_warnings(self, engine, new_hire, as_of):
        ews = engine.evaluate(new_hire, as_of=as_of).report.ews
        assert ews == ()

    def test_one_margin_decline_warns_once(self, engine, strong_sbc, as_of):
        sub = replace(strong_sbc, team_metrics=TeamMetrics(margin=(12_000, 12_000, 12_000, 9_000), new_accounts=(5, 6, 6, 7)))
        ews = engine.evaluate(sub, as_of=as_of).report.ews
        margin_entries = [e for e in ews if "Margin Tim" in e.indikator]
        assert len(margin_entries) == 1
        assert margin_entries[0].faktor == "Pencapaian Margin Tim"
        assert "turun dari 12,000 ke 9,000" in margin_entries[0].indikator
