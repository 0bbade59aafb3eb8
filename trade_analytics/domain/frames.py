"""Analysis Frame: Trade sequence as a polars DataFrame.

The bucketed aggregations (daily, hourly, weekly, per symbol) all
group the same columns by a different key, so they share one frame:

    symbol    Utf8
    sell_date Date
    hour      Int64    hour of sell_time (0 if missing)
    weekday   Int64    Sunday = 0 ... Saturday = 6
    profit    Float64
"""

from typing import Sequence

import polars as pl

from trade_analytics.domain.models import MatchedTrade

ANALYSIS_SCHEMA = {
    "symbol": pl.Utf8,
    "sell_date": pl.Date,
    "hour": pl.Int64,
    "weekday": pl.Int64,
    "profit": pl.Float64,
}


def analysis_frame(trades: Sequence[MatchedTrade]) -> pl.DataFrame:
    """Build the analysis frame for a trade sequence.

    Args:
        trades: Matched trades

    Returns:
        DataFrame with ANALYSIS_SCHEMA columns, one row per trade
    """
    return pl.DataFrame(
        {
            "symbol": [t.symbol for t in trades],
            "sell_date": [t.sell_date for t in trades],
            "hour": [t.sell_hour for t in trades],
            "weekday": [t.sell_weekday for t in trades],
            "profit": [float(t.profit) for t in trades],
        },
        schema=ANALYSIS_SCHEMA,
    )


def aggregate_by(frame: pl.DataFrame, key: str) -> pl.DataFrame:
    """Group the frame by one key column.

    Args:
        frame: Analysis frame
        key: Column to group by

    Returns:
        DataFrame with columns: key, total_pnl, trades, avg_pnl
        (unsorted)
    """
    return (
        frame
        .group_by(key)
        .agg(
            pl.col("profit").sum().alias("total_pnl"),
            pl.len().alias("trades"),
        )
        .with_columns(
            (pl.col("total_pnl") / pl.col("trades")).alias("avg_pnl")
        )
    )
