"""Trade Analytics: Performance statistics for matched trades.

Computes aggregate statistics (net PNL, win rate, profit factor,
drawdown, streaks) and chart series (equity curve, daily PNL,
distributions, hourly/weekday/symbol breakdowns) from a user's
chronological sequence of matched round-trip trades.

Architecture:
- domain/: Core business logic (models, metrics, charts)
- infrastructure/: I/O and external dependencies
- application/: Use cases and services
- interfaces/: CLI
"""

__version__ = "0.3.0"

from trade_analytics.domain import (
    MatchedTrade,
    ProfitFactor,
    AnalyticsSnapshot,
    ChartData,
)
from trade_analytics.infrastructure import (
    DataPaths,
    AnalysisConfig,
    DEFAULT_PATHS,
    RepositoryError,
)
from trade_analytics.application import (
    AnalyticsQuery,
    AnalyticsResult,
    AnalyticsService,
    compute_analytics,
)

__all__ = [
    # Version
    "__version__",
    # Domain models
    "MatchedTrade",
    "ProfitFactor",
    "AnalyticsSnapshot",
    "ChartData",
    # Infrastructure
    "DataPaths",
    "AnalysisConfig",
    "DEFAULT_PATHS",
    "RepositoryError",
    # Application
    "AnalyticsQuery",
    "AnalyticsResult",
    "AnalyticsService",
    "compute_analytics",
]
