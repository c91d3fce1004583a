"""Quarter Progress Tracker.

The only stage that reads the calendar. Everything else in the engine is a
pure function of the submission, so ``as_of`` is passed in explicitly.
"""

from __future__ import annotations

from datetime import date, timedelta

from aisg.engine.result import QuarterProgress
from aisg.methodology.schema import RoleTierConfig
from aisg.models.submission import QUARTERS, AuditSubmission

# Within this many percentage points of the elapsed-time pace counts as on track.
PACE_TOLERANCE = 10.0


def quarter_of(day: date) -> int:
    """1-based quarter index for a date."""
    return (day.month - 1) // 3 + 1


def quarter_bounds(year: int, quarter: int) -> tuple[date, date]:
    start = date(year, 3 * (quarter - 1) + 1, 1)
    if quarter == 4:
        end = date(year, 12, 31)
    else:
        end = date(year, 3 * quarter + 1, 1) - timedelta(days=1)
    return start, end


def percentage(realisasi: float, target: float) -> float:
    """realisasi / target x 100, reported as 0 when the target is not positive."""
    if target <= 0:
        return 0.0
    return round(realisasi / target * 100, 1)


def _catatan(pct_margin: float, pct_na: float, elapsed_pct: float, sisa_hari: int) -> str:
    weakest = min(pct_margin, pct_na)
    if weakest >= 100:
        return "Target kuartal margin dan NA sudah tercapai. Pertahankan momentum hingga akhir kuartal."
    if weakest >= elapsed_pct - PACE_TOLERANCE:
        return (
            f"Progres sesuai ritme waktu ({elapsed_pct:.0f}% kuartal berjalan). "
            f"Sisa {sisa_hari} hari untuk menuntaskan target."
        )
    return (
        f"Progres tertinggal dari ritme waktu ({elapsed_pct:.0f}% kuartal berjalan). "
        f"Percepat closing dalam {sisa_hari} hari tersisa."
    )


def track_quarter_progress(
    submission: AuditSubmission,
    tier: RoleTierConfig,
    as_of: date,
) -> QuarterProgress:
    quarter = quarter_of(as_of)
    start, end = quarter_bounds(as_of.year, quarter)
    sisa_hari = (end - as_of).days
    elapsed_pct = ((as_of - start).days + 1) / ((end - start).days + 1) * 100

    realisasi_margin = submission.team_metrics.margin[quarter - 1]
    realisasi_na = submission.team_metrics.new_accounts[quarter - 1]
    pct_margin = percentage(realisasi_margin, tier.target_margin_tim)
    pct_na = percentage(realisasi_na, tier.target_na_tim)

    return QuarterProgress(
        kuartal_berjalan=QUARTERS[quarter - 1],
        sisa_hari=sisa_hari,
        target_margin=tier.target_margin_tim,
        realisasi_margin=realisasi_margin,
        percentage_margin=pct_margin,
        target_na=tier.target_na_tim,
        realisasi_na=realisasi_na,
        percentage_na=pct_na,
        catatan=_catatan(pct_margin, pct_na, elapsed_pct, sisa_hari),
    )
