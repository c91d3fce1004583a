"""Error taxonomy for the audit engine.

Every error aborts the whole evaluation; no partial AuditResult is ever
returned. The calling layer translates these into user-facing messages.
"""

from __future__ import annotations


class AuditEngineError(Exception):
    """Base class for all engine errors."""


class ValidationError(AuditEngineError):
    """Malformed or out-of-range submission input.

    Carries the offending field path so the intake layer can point the user
    at it (e.g. ``pillar_answers[3].self_score``).
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ConfigurationError(AuditEngineError):
    """Missing or inconsistent methodology configuration.

    Indicates a deployment defect (e.g. a pillar or role tier without a
    table entry), never bad user input.
    """
