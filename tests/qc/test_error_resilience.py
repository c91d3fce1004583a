"""Tests for fail-closed behavior -- no partial results on errors."""

from dataclasses import replace
from unittest.mock import patch

import pytest

from aisg.engine.calculator import AuditEngine
from aisg.errors import ConfigurationError


class TestErrorResilience:
    """Every configuration defect aborts the whole evaluation."""

    def test_missing_insight_template_aborts(self, engine, strong_sbc, as_of):
        with patch("aisg.engine.gaps.INSIGHT_TEMPLATES", {}):
            with pytest.raises(ConfigurationError, match="No insight template"):
                engine.evaluate(strong_sbc, as_of=as_of)

    def test_missing_role_tier_aborts(self, v1_config, strong_sbc, as_of):
        trimmed = v1_config.model_copy(
            update={"role_tiers": [t for t in v1_config.role_tiers if t.code != "BsM"]}
        )
        # unknown position with an SBC on the team infers BsM
        sub = replace(strong_sbc, jabatan="Kepala Unit")
        with pytest.raises(ConfigurationError, match="BsM"):
            AuditEngine(trimmed).evaluate(sub, as_of=as_of)

    def test_unregistered_metric_aborts(self, engine, strong_sbc, as_of):
        with patch("aisg.engine.reality.get_metric", return_value=None):
            with pytest.raises(ConfigurationError, match="not found in registry"):
                engine.evaluate(strong_sbc, as_of=as_of)

    def test_default_methodology_not_mutated(self, engine, v1_config, strong_sbc, as_of):
        before = v1_config.model_dump()
        engine.evaluate(strong_sbc, as_of=as_of)
        assert v1_config.model_dump() == before
