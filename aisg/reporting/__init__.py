"""Cross-audit views: history comparison and dashboard aggregation."""

from .dashboard import DashboardSummary, summarize_results
from .history import AuditComparison, compare_results

__all__ = ["DashboardSummary", "summarize_results", "AuditComparison", "compare_results"]
