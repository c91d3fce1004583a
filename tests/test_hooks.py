"""Tests for audit hooks -- evaluation audit-trail entries."""

import logging

from aisg.hooks.audit_hooks import log_evaluation


class TestAuditHooks:
    def test_entry_summarizes_result(self, engine, strong_sbc, as_of):
        result = engine.evaluate(strong_sbc, as_of=as_of)
        entry = log_evaluation(strong_sbc, result)
        assert entry["nama"] == "Rina Wijaya"
        assert entry["cabang"] == "Jakarta Pusat"
        assert entry["total_reality_score"] == 84
        assert entry["zona_final"] == "hijau"
        assert entry["recommendation"] == "Promosi"
        assert entry["methodology_version"] == "pilar18@1.0.0"
        assert entry["timestamp"].endswith("+00:00")

    def test_logs_at_info(self, engine, at_risk_sbc, as_of, caplog):
        result = engine.evaluate(at_risk_sbc, as_of=as_of)
        with caplog.at_level(logging.INFO, logger="aisg.hooks.audit_hooks"):
            log_evaluation(at_risk_sbc, result)
        assert any("Budi Santoso" in r.getMessage() for r in caplog.records)
