"""Domain Layer: Core business logic and entities.

This layer contains:
- models.py: Data structures (MatchedTrade, AnalyticsSnapshot, ChartData)
- frames.py: Trade sequence as a polars DataFrame for bucketing
- metrics/: Scalar statistics (performance, drawdown, streaks, daily)
- charts/: Derived series (equity, histogram, buckets)

Everything here is a pure function of the trade sequence passed in.
"""

from trade_analytics.domain.models import (
    WEEKDAY_NAMES,
    MatchedTrade,
    ProfitFactor,
    AnalyticsSnapshot,
    ChartData,
    EquityPoint,
    DailyPnLPoint,
    DistributionPoint,
    HistogramBin,
    BucketPerformance,
    SymbolPerformance,
)
from trade_analytics.domain.metrics import (
    PerformanceMetrics,
    DrawdownStats,
    StreakStats,
    DailyMetrics,
    calculate_performance_metrics,
    calculate_drawdown,
    calculate_streaks,
    calculate_daily_metrics,
    calculate_snapshot,
)
from trade_analytics.domain.charts import (
    build_histogram,
    generate_chart_data,
)

__all__ = [
    # Models
    "WEEKDAY_NAMES",
    "MatchedTrade",
    "ProfitFactor",
    "AnalyticsSnapshot",
    "ChartData",
    "EquityPoint",
    "DailyPnLPoint",
    "DistributionPoint",
    "HistogramBin",
    "BucketPerformance",
    "SymbolPerformance",
    # Metrics
    "PerformanceMetrics",
    "DrawdownStats",
    "StreakStats",
    "DailyMetrics",
    "calculate_performance_metrics",
    "calculate_drawdown",
    "calculate_streaks",
    "calculate_daily_metrics",
    "calculate_snapshot",
    # Charts
    "build_histogram",
    "generate_chart_data",
]
