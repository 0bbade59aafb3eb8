"""Scalar trading metrics for a matched-trade sequence.

This package provides the statistics behind an AnalyticsSnapshot:

- Performance: Net PNL, win rate, profit factor, averages
- Drawdown: Running peak/trough analysis
- Streaks: Longest win/loss runs
- Daily: Profitable and losing day counts

Usage:
    from trade_analytics.domain.metrics import (
        calculate_performance_metrics,
        calculate_drawdown,
        calculate_snapshot,
    )
"""

# Performance
from trade_analytics.domain.metrics.performance import (
    PerformanceMetrics,
    calculate_performance_metrics,
    calculate_profit_factor,
)

# Drawdown
from trade_analytics.domain.metrics.drawdown import (
    DrawdownPoint,
    DrawdownStats,
    drawdown_series,
    calculate_drawdown,
)

# Streaks
from trade_analytics.domain.metrics.streaks import (
    FLAT_TRADE_POLICIES,
    FlatTradePolicy,
    StreakStats,
    calculate_streaks,
)

# Daily
from trade_analytics.domain.metrics.daily import (
    DailyMetrics,
    aggregate_daily_pnl,
    calculate_daily_metrics,
)

# Snapshot
from trade_analytics.domain.metrics.snapshot import calculate_snapshot

__all__ = [
    # Performance
    "PerformanceMetrics",
    "calculate_performance_metrics",
    "calculate_profit_factor",
    # Drawdown
    "DrawdownPoint",
    "DrawdownStats",
    "drawdown_series",
    "calculate_drawdown",
    # Streaks
    "FLAT_TRADE_POLICIES",
    "FlatTradePolicy",
    "StreakStats",
    "calculate_streaks",
    # Daily
    "DailyMetrics",
    "aggregate_daily_pnl",
    "calculate_daily_metrics",
    # Snapshot
    "calculate_snapshot",
]
