"""Bucket Performance: PNL grouped by hour, weekday, or symbol.

All three aggregations share one structure (see frames.aggregate_by);
only the grouping key and the output ordering differ:

    hourly  -> hour of sell_time     every observed hour, ascending
    weekly  -> weekday of sell_date  every observed day, Sunday first
    symbol  -> symbol                top N by total PNL, descending

Each bucket reports trades, total_pnl and avg_pnl = total_pnl / trades.
"""

from typing import Sequence

import polars as pl

from trade_analytics.domain.frames import aggregate_by, analysis_frame
from trade_analytics.domain.models import (
    WEEKDAY_NAMES,
    BucketPerformance,
    MatchedTrade,
    SymbolPerformance,
)

DEFAULT_TOP_SYMBOLS = 10


def _bucket_rows(frame: pl.DataFrame, key: str) -> list[dict]:
    return list(
        aggregate_by(frame, key)
        .sort(key)
        .select([key, "avg_pnl", "total_pnl", "trades"])
        .iter_rows(named=True)
    )


def hourly_performance(trades: Sequence[MatchedTrade]) -> list[BucketPerformance]:
    """PNL by hour of day the position was closed.

    Trades without a sell time count toward hour 0.

    Returns:
        One bucket per observed hour, labelled "H:00", ascending by hour
    """
    if not trades:
        return []

    return [
        BucketPerformance(
            label=f"{row['hour']}:00",
            avg_pnl=row["avg_pnl"],
            total_pnl=row["total_pnl"],
            trades=row["trades"],
        )
        for row in _bucket_rows(analysis_frame(trades), "hour")
    ]


def weekly_performance(trades: Sequence[MatchedTrade]) -> list[BucketPerformance]:
    """PNL by day of week of the sell date.

    Returns:
        One bucket per observed weekday, in Sunday..Saturday order
    """
    if not trades:
        return []

    return [
        BucketPerformance(
            label=WEEKDAY_NAMES[row["weekday"]],
            avg_pnl=row["avg_pnl"],
            total_pnl=row["total_pnl"],
            trades=row["trades"],
        )
        for row in _bucket_rows(analysis_frame(trades), "weekday")
    ]


def symbol_performance(
    trades: Sequence[MatchedTrade],
    top_n: int = DEFAULT_TOP_SYMBOLS,
) -> list[SymbolPerformance]:
    """PNL by symbol, best performers first.

    Args:
        trades: Matched trades
        top_n: Maximum number of symbols returned

    Returns:
        Up to top_n symbols sorted by total PNL descending
        (ties by symbol ascending)

    Raises:
        ValueError: If top_n is negative
    """
    if top_n < 0:
        raise ValueError(f"top_n must be non-negative, got: {top_n}")
    if not trades:
        return []

    ranked = (
        aggregate_by(analysis_frame(trades), "symbol")
        .sort(["total_pnl", "symbol"], descending=[True, False])
        .head(top_n)
    )

    return [
        SymbolPerformance(
            symbol=row["symbol"],
            total_pnl=row["total_pnl"],
            trades=row["trades"],
            avg_pnl=row["avg_pnl"],
        )
        for row in ranked.iter_rows(named=True)
    ]
