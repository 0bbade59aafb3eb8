"""Application Services for Trade Analytics.

Services orchestrate repository access to implement use cases.

Available services:
- AnalyticsService: Snapshot and chart data for one user's trades
"""

from trade_analytics.application.services.analytics import (
    PERIOD_MONTHS,
    AnalyticsQuery,
    AnalyticsSummary,
    AnalyticsResult,
    AnalyticsService,
    compute_analytics,
    filter_trades,
    period_cutoff,
    shift_months,
)

__all__ = [
    "PERIOD_MONTHS",
    "AnalyticsQuery",
    "AnalyticsSummary",
    "AnalyticsResult",
    "AnalyticsService",
    "compute_analytics",
    "filter_trades",
    "period_cutoff",
    "shift_months",
]
