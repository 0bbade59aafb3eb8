"""Chart Data: Assemble every chart series for a trade sequence."""

from typing import Sequence

from trade_analytics.domain.models import ChartData, MatchedTrade
from trade_analytics.domain.metrics.daily import aggregate_daily_pnl
from trade_analytics.domain.charts.buckets import (
    DEFAULT_TOP_SYMBOLS,
    hourly_performance,
    symbol_performance,
    weekly_performance,
)
from trade_analytics.domain.charts.equity import equity_curve, win_loss_distribution
from trade_analytics.domain.charts.histogram import DEFAULT_BINS, build_histogram


def generate_chart_data(
    trades: Sequence[MatchedTrade],
    bins: int = DEFAULT_BINS,
    top_symbols: int = DEFAULT_TOP_SYMBOLS,
) -> ChartData:
    """Generate all chart series.

    Args:
        trades: Matched trades in sell-date order
        bins: Histogram bin count
        top_symbols: Number of symbols kept in symbol_performance

    Returns:
        ChartData. Empty input yields ChartData.empty().
    """
    if not trades:
        return ChartData.empty()

    return ChartData(
        equity_curve=equity_curve(trades),
        daily_pnl=aggregate_daily_pnl(trades),
        win_loss_distribution=win_loss_distribution(trades),
        profit_loss_distribution=build_histogram([t.profit for t in trades], bins=bins),
        hourly_performance=hourly_performance(trades),
        weekly_performance=weekly_performance(trades),
        symbol_performance=symbol_performance(trades, top_n=top_symbols),
    )
