"""Daily PNL: Trades grouped by the calendar day they were closed.

Provides:
- aggregate_daily_pnl: Per-day PNL series for charting
- calculate_daily_metrics: Profitable/loss day counts for the snapshot

A day whose trades sum to exactly 0 is neither profitable nor a loss day,
but is drawn in the "green" color like any non-negative day.
"""

from dataclasses import dataclass
from typing import Sequence

from trade_analytics.domain.frames import aggregate_by, analysis_frame
from trade_analytics.domain.models import DailyPnLPoint, MatchedTrade

PROFIT_COLOR = "green"
LOSS_COLOR = "red"


@dataclass(frozen=True, slots=True)
class DailyMetrics:
    """Day counts by sign of the daily PNL."""
    profitable_days: int
    loss_days: int

    @property
    def trading_days(self) -> int:
        """Days with a non-zero PNL."""
        return self.profitable_days + self.loss_days


def aggregate_daily_pnl(trades: Sequence[MatchedTrade]) -> list[DailyPnLPoint]:
    """Sum PNL per sell date.

    Args:
        trades: Matched trades

    Returns:
        One DailyPnLPoint per day with trades, ascending by date

    Example:
        >>> aggregate_daily_pnl(trades)
        [DailyPnLPoint(date='2024-01-02', pnl=50.0, color='green'), ...]
    """
    if not trades:
        return []

    daily = aggregate_by(analysis_frame(trades), "sell_date").sort("sell_date")

    return [
        DailyPnLPoint(
            date=row["sell_date"].isoformat(),
            pnl=row["total_pnl"],
            color=PROFIT_COLOR if row["total_pnl"] >= 0 else LOSS_COLOR,
        )
        for row in daily.select(["sell_date", "total_pnl"]).iter_rows(named=True)
    ]


def calculate_daily_metrics(trades: Sequence[MatchedTrade]) -> DailyMetrics:
    """Count profitable and losing days.

    Args:
        trades: Matched trades

    Returns:
        DailyMetrics. Empty input yields zeros.
    """
    if not trades:
        return DailyMetrics(profitable_days=0, loss_days=0)

    totals = aggregate_by(analysis_frame(trades), "sell_date")["total_pnl"]

    return DailyMetrics(
        profitable_days=int((totals > 0).sum()),
        loss_days=int((totals < 0).sum()),
    )
