"""Fail-closed re-check of submission invariants before any scoring."""

from __future__ import annotations

import math
import re

from aisg.errors import ValidationError
from aisg.methodology.schema import PILLAR_COUNT
from aisg.models.submission import TIER_CODES, AuditSubmission

_BIRTH_DATE_RE = re.compile(r"^\d{2}-\d{2}-\d{4}$")

MIN_SCORE = 1
MAX_SCORE = 5


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_series(field: str, series, non_negative: bool) -> None:
    if len(series) != 4:
        raise ValidationError(field, f"expected 4 quarterly values, got {len(series)}")
    for i, value in enumerate(series):
        if not _is_number(value):
            raise ValidationError(f"{field}[{i}]", f"must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValidationError(f"{field}[{i}]", f"must be a finite number, got {value!r}")
        if non_negative and value < 0:
            raise ValidationError(f"{field}[{i}]", f"cannot be negative, got {value}")


def validate_submission(submission: AuditSubmission) -> None:
    """Raise ValidationError on the first violated invariant.

    Checks identity fields, birth date, quarterly series, team structure and
    the 18 pillar self answers.
    """
    if not submission.nama or not submission.nama.strip():
        raise ValidationError("nama", "must not be empty")
    if not submission.jabatan or not submission.jabatan.strip():
        raise ValidationError("jabatan", "must not be empty")

    if not _BIRTH_DATE_RE.match(submission.tanggal_lahir or ""):
        raise ValidationError("tanggal_lahir", "format must be DD-MM-YYYY")
    try:
        submission.birth_date()
    except ValueError:
        raise ValidationError(
            "tanggal_lahir", f"'{submission.tanggal_lahir}' is not a valid calendar date"
        ) from None

    _check_series("team_metrics.margin", submission.team_metrics.margin, non_negative=True)
    _check_series(
        "team_metrics.new_accounts", submission.team_metrics.new_accounts, non_negative=True
    )
    _check_series("personal_metrics.margin", submission.personal_metrics.margin, non_negative=False)
    _check_series(
        "personal_metrics.new_clients",
        submission.personal_metrics.new_clients,
        non_negative=False,
    )

    for code in TIER_CODES:
        count = submission.team_structure.count(code)
        if not _is_int(count) or count < 0:
            raise ValidationError(
                f"team_structure.{code.lower()}", f"must be a non-negative integer, got {count!r}"
            )

    answers = submission.pillar_answers
    if len(answers) != PILLAR_COUNT:
        raise ValidationError(
            "pillar_answers", f"expected exactly {PILLAR_COUNT} answers, got {len(answers)}"
        )
    seen: set[int] = set()
    for i, answer in enumerate(answers):
        if not _is_int(answer.pillar_id) or not (1 <= answer.pillar_id <= PILLAR_COUNT):
            raise ValidationError(
                f"pillar_answers[{i}].pillar_id",
                f"must be an integer in 1..{PILLAR_COUNT}, got {answer.pillar_id!r}",
            )
        if answer.pillar_id in seen:
            raise ValidationError(
                f"pillar_answers[{i}].pillar_id", f"duplicate pillar id {answer.pillar_id}"
            )
        seen.add(answer.pillar_id)
        if not _is_int(answer.self_score) or not (MIN_SCORE <= answer.self_score <= MAX_SCORE):
            raise ValidationError(
                f"pillar_answers[{i}].self_score",
                f"must be an integer in {MIN_SCORE}..{MAX_SCORE}, got {answer.self_score!r}",
            )
