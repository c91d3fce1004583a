"""Shared test fixtures for the AiSG audit engine test suite."""

from datetime import date

import pytest

from aisg.engine.calculator import AuditEngine
from aisg.methodology.loader import get_default_methodology
from aisg.models.submission import (
    AuditSubmission,
    PersonalMetrics,
    PillarSelfAnswer,
    TeamMetrics,
    TeamStructure,
)

METRIC_PILLARS = range(1, 7)
BEHAVIORAL_PILLARS = range(7, 19)

# Middle of Q2: 46 days left until 30 June.
AS_OF = date(2025, 5, 15)


def make_answers(metric=5, behavioral=5, overrides=None):
    """18 self answers: one score for pillars 1-6, another for 7-18."""
    overrides = overrides or {}
    answers = []
    for pillar_id in range(1, 19):
        score = metric if pillar_id in METRIC_PILLARS else behavioral
        answers.append(PillarSelfAnswer(pillar_id, overrides.get(pillar_id, score)))
    return tuple(answers)


@pytest.fixture
def v1_config():
    return get_default_methodology()


@pytest.fixture
def engine():
    return AuditEngine()


@pytest.fixture
def as_of():
    return AS_OF


@pytest.fixture
def strong_sbc() -> AuditSubmission:
    """SBC beating every target with a full BsM-ready team.

    Metric pillars all 5; corroborated behavioral pillars 7-12 trusted at 5,
    pillars 13-18 damped to 4. Reality 84/90 -> hijau, Leader, Promosi.
    """
    return AuditSubmission(
        nama="Rina Wijaya",
        jabatan="SBC",
        cabang="Jakarta Pusat",
        tanggal_lahir="15-08-1990",
        team_metrics=TeamMetrics(
            margin=(10_000, 11_000, 12_000, 12_000),
            new_accounts=(5, 6, 6, 7),
        ),
        personal_metrics=PersonalMetrics(
            margin=(6_000, 6_500, 7_000, 7_000),
            new_clients=(3, 3, 4, 4),
        ),
        team_structure=TeamStructure(bc=4, sbc=1),
        pillar_answers=make_answers(5, 5),
    )


@pytest.fixture
def at_risk_sbc() -> AuditSubmission:
    """SBC far below target, overestimating metrics, no save rule met.

    Reality 31/90 -> merah, At-Risk, Demosi to BC.
    """
    return AuditSubmission(
        nama="Budi Santoso",
        jabatan="SBC",
        cabang="Surabaya",
        tanggal_lahir="02-01-1978",
        team_metrics=TeamMetrics(
            margin=(2_000, 1_500, 1_000, 500),
            new_accounts=(1, 1, 0, 0),
        ),
        personal_metrics=PersonalMetrics(
            margin=(1_000, 500, -200, 0),
            new_clients=(1, 0, 0, 0),
        ),
        team_structure=TeamStructure(bc=1),
        pillar_answers=make_answers(4, 2),
    )


@pytest.fixture
def performer_sbc() -> AuditSubmission:
    """Weak numbers but a full team corroborating leadership pillars.

    Kinerja 30 (critical), perilaku 75 (success) -> Performer; headcount
    meets the save-by-staff rule -> Pembinaan.
    """
    return AuditSubmission(
        nama="Sari Dewi",
        jabatan="SBC",
        cabang="Bandung",
        tanggal_lahir="21-03-1999",
        team_metrics=TeamMetrics(margin=(1_000, 1_000, 1_000, 1_000)),
        team_structure=TeamStructure(bc=3),
        pillar_answers=make_answers(3, 5),
    )


@pytest.fixture
def new_hire() -> AuditSubmission:
    """No quarterly data at all; every self score 5."""
    return AuditSubmission(
        nama="Andi Pratama",
        jabatan="BC",
        cabang="Medan",
        tanggal_lahir="10-11-2000",
        pillar_answers=make_answers(5, 5),
    )
