"""AiSG 18 Pilar audit evaluation and report synthesis engine."""

from .engine import AuditEngine, AuditResult, evaluate
from .errors import AuditEngineError, ConfigurationError, ValidationError
from .models.submission import (
    AuditSubmission,
    PersonalMetrics,
    PillarSelfAnswer,
    TeamMetrics,
    TeamStructure,
)
from .serialization import result_to_payload

__all__ = [
    "AuditEngine",
    "AuditResult",
    "evaluate",
    "AuditEngineError",
    "ConfigurationError",
    "ValidationError",
    "AuditSubmission",
    "PersonalMetrics",
    "PillarSelfAnswer",
    "TeamMetrics",
    "TeamStructure",
    "result_to_payload",
]
