"""Quarter-over-quarter trend helpers over the reported quarters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from aisg.metrics.registry import get_metric
from aisg.models.submission import AuditSubmission


@dataclass(frozen=True)
class Trend:
    values: tuple[float, ...]

    @property
    def deltas(self) -> tuple[float, ...]:
        return tuple(b - a for a, b in zip(self.values, self.values[1:]))

    @property
    def upward(self) -> bool:
        """Last reported quarter above the first one."""
        return len(self.values) >= 2 and self.values[-1] > self.values[0]

    @property
    def last_change(self) -> Optional[float]:
        return self.deltas[-1] if self.deltas else None

    @property
    def declining(self) -> bool:
        """Negative change across the last two reported quarters."""
        change = self.last_change
        return change is not None and change < 0


def metric_trend(metric_id: str, submission: AuditSubmission) -> Optional[Trend]:
    """Trend of a metric's series, or None for metrics without a series."""
    definition = get_metric(metric_id)
    if definition is None or not definition.trend:
        return None
    quarters = submission.reported_quarters()
    return Trend(tuple(submission.series(definition.series)[:quarters]))
