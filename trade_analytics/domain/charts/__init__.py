"""Chart series derived from a matched-trade sequence.

- Equity: Cumulative PNL curve, win/loss distribution
- Histogram: Profit/loss value distribution
- Buckets: Hourly, weekday and per-symbol performance
"""

from trade_analytics.domain.charts.equity import (
    equity_curve,
    win_loss_distribution,
)
from trade_analytics.domain.charts.histogram import (
    DEFAULT_BINS,
    build_histogram,
)
from trade_analytics.domain.charts.buckets import (
    DEFAULT_TOP_SYMBOLS,
    hourly_performance,
    weekly_performance,
    symbol_performance,
)
from trade_analytics.domain.charts.chart_data import generate_chart_data

__all__ = [
    # Equity
    "equity_curve",
    "win_loss_distribution",
    # Histogram
    "DEFAULT_BINS",
    "build_histogram",
    # Buckets
    "DEFAULT_TOP_SYMBOLS",
    "hourly_performance",
    "weekly_performance",
    "symbol_performance",
    # Assembly
    "generate_chart_data",
]
