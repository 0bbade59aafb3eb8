"""Application Layer: Use cases and service orchestration.

This layer contains:
- services/: Business logic orchestration
  - analytics.py: Filtering, snapshot reuse, per-user analytics
"""

from trade_analytics.application.services import (
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
    "AnalyticsQuery",
    "AnalyticsSummary",
    "AnalyticsResult",
    "AnalyticsService",
    "compute_analytics",
    "filter_trades",
    "period_cutoff",
    "shift_months",
]
