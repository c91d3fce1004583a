from .calculator import AuditEngine, evaluate
from .result import AuditReport, AuditResult, PillarAssessment

__all__ = ["AuditEngine", "evaluate", "AuditReport", "AuditResult", "PillarAssessment"]
