"""Analytics Service: Snapshot and chart data for one user's trades.

Orchestrates the full analytics calculation:
1. Load the user's matched trades (and stored snapshot) via repositories
2. Filter trades by explicit date range or relative period
3. Calculate the snapshot, or reuse the stored one for the default window
4. Generate chart data (always fresh)

Filtering:
    start_date and end_date  -> start_date <= sell_date <= end_date
    period only              -> sell_date >= today - period
                                ("1m", "3m", "6m", "1y"; others mean "1y")
    nothing                  -> all trades

A stored snapshot is reused only when no date is given and the period
is exactly the default ("1y"). Everything else is recomputed.
"""

import calendar
import logging
import time
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Sequence

from trade_analytics.domain.models import AnalyticsSnapshot, ChartData, MatchedTrade
from trade_analytics.domain.metrics import FLAT_TRADE_POLICIES, calculate_snapshot
from trade_analytics.domain.charts import generate_chart_data
from trade_analytics.infrastructure import (
    AnalysisConfig,
    DataPaths,
    DEFAULT_CONFIG,
    DEFAULT_PATHS,
    MatchedTradeRepository,
    SnapshotRepository,
    TTLCache,
)

logger = logging.getLogger(__name__)

# Months subtracted from today for each period code
PERIOD_MONTHS = {
    "1m": 1,
    "3m": 3,
    "6m": 6,
    "1y": 12,
}
FALLBACK_PERIOD_MONTHS = 12


# =============================================================================
# Query
# =============================================================================

def _parse_date(value: date | str | None, field_name: str) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError as e:
        raise ValueError(f"{field_name} must be YYYY-MM-DD format, got: {value}") from e


@dataclass(frozen=True, slots=True)
class AnalyticsQuery:
    """Filter options for an analytics request.

    Attributes:
        period: Relative period code ("1m", "3m", "6m", "1y")
        start_date: Inclusive start of an explicit range
        end_date: Inclusive end of an explicit range

    The explicit range applies only when both dates are given;
    otherwise the period applies, if any.
    """
    period: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    @classmethod
    def from_params(
        cls,
        period: str | None = None,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> "AnalyticsQuery":
        """Build a query from raw parameters (ISO strings accepted).

        Raises:
            ValueError: If a date string is not YYYY-MM-DD
        """
        return cls(
            period=period or None,
            start_date=_parse_date(start_date, "start_date"),
            end_date=_parse_date(end_date, "end_date"),
        )

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None and self.end_date is not None

    def allows_precomputed(self, default_period: str = "1y") -> bool:
        """Whether a stored snapshot may stand in for a fresh calculation."""
        return (
            self.start_date is None
            and self.end_date is None
            and self.period == default_period
        )


def shift_months(d: date, months: int) -> date:
    """Move a date back by whole calendar months.

    The day is clamped to the target month's length (Mar 31 - 1m = Feb 28/29).
    """
    total = d.year * 12 + (d.month - 1) - months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def period_cutoff(period: str, today: date) -> date:
    """First sell date included by a period filter."""
    months = PERIOD_MONTHS.get(period, FALLBACK_PERIOD_MONTHS)
    return shift_months(today, months)


def filter_trades(
    trades: Sequence[MatchedTrade],
    query: AnalyticsQuery,
    today: date | None = None,
) -> list[MatchedTrade]:
    """Select the trades an analytics query covers.

    Args:
        trades: Matched trades in sell-date order
        query: Filter options
        today: Reference date for period filters (defaults to date.today())

    Returns:
        Filtered trades, order preserved
    """
    if query.has_date_range:
        return [
            t for t in trades
            if query.start_date <= t.sell_date <= query.end_date
        ]

    if query.period:
        cutoff = period_cutoff(query.period, today or date.today())
        return [t for t in trades if t.sell_date >= cutoff]

    return list(trades)


# =============================================================================
# Result
# =============================================================================

@dataclass(frozen=True, slots=True)
class AnalyticsSummary:
    """Size and date span of the analyzed trades."""
    total_trades: int
    start: date | None
    end: date | None

    @classmethod
    def from_trades(cls, trades: Sequence[MatchedTrade]) -> "AnalyticsSummary":
        if not trades:
            return cls(total_trades=0, start=None, end=None)
        return cls(
            total_trades=len(trades),
            start=trades[0].sell_date,
            end=trades[-1].sell_date,
        )


@dataclass(frozen=True, slots=True)
class AnalyticsResult:
    """Complete analytics for one request.

    Attributes:
        snapshot: Aggregate statistics
        chart_data: Derived chart series
        summary: Trade count and date span after filtering
        used_precomputed: True if snapshot came from the snapshot store
    """
    snapshot: AnalyticsSnapshot
    chart_data: ChartData
    summary: AnalyticsSummary
    used_precomputed: bool = False

    def to_dict(self) -> dict:
        """Convert to plain dictionaries for JSON output."""
        return {
            "analytics": self.snapshot.to_dict(),
            "chart_data": self.chart_data.to_dict(),
            "summary": {
                "total_trades": self.summary.total_trades,
                "date_range": {
                    "start": self.summary.start.isoformat() if self.summary.start else None,
                    "end": self.summary.end.isoformat() if self.summary.end else None,
                },
            },
            "used_precomputed": self.used_precomputed,
        }


# =============================================================================
# Orchestration
# =============================================================================

def compute_analytics(
    trades: Sequence[MatchedTrade],
    query: AnalyticsQuery | None = None,
    precomputed: AnalyticsSnapshot | None = None,
    today: date | None = None,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> AnalyticsResult:
    """Calculate snapshot and chart data for a trade sequence.

    Pure function: no I/O, no state kept between calls.

    Args:
        trades: Matched trades in sell-date order
        query: Filter options (no filter if None)
        precomputed: Stored snapshot, used only for the default window
        today: Reference date for period filters
        config: Engine configuration

    Returns:
        AnalyticsResult
    """
    if config.flat_trade_policy not in FLAT_TRADE_POLICIES:
        raise ValueError(
            f"flat_trade_policy must be one of {FLAT_TRADE_POLICIES}, "
            f"got: {config.flat_trade_policy}"
        )

    query = query or AnalyticsQuery()
    filtered = filter_trades(trades, query, today=today)

    use_precomputed = (
        precomputed is not None
        and query.allows_precomputed(config.default_period)
    )
    if use_precomputed:
        snapshot = precomputed
    else:
        snapshot = calculate_snapshot(filtered, flat_policy=config.flat_trade_policy)

    chart_data = generate_chart_data(
        filtered,
        bins=config.histogram_bins,
        top_symbols=config.top_symbols,
    )

    return AnalyticsResult(
        snapshot=snapshot,
        chart_data=chart_data,
        summary=AnalyticsSummary.from_trades(filtered),
        used_precomputed=use_precomputed,
    )


class AnalyticsService:
    """Service for per-user trade analytics.

    Loads data through repositories, then delegates to compute_analytics.

    Example:
        >>> service = AnalyticsService()
        >>> result = service.get_user_analytics(
        ...     "user_123", AnalyticsQuery(period="3m")
        ... )
        >>> result.snapshot.win_rate
    """

    def __init__(
        self,
        paths: DataPaths = DEFAULT_PATHS,
        config: AnalysisConfig | None = None,
        trade_repo: MatchedTradeRepository | None = None,
        snapshot_repo: SnapshotRepository | None = None,
        today: Callable[[], date] = date.today,
    ):
        """Initialize the service.

        Args:
            paths: Data paths configuration
            config: Engine configuration (uses defaults if not provided)
            trade_repo: Matched trade source (built from paths if not provided)
            snapshot_repo: Stored snapshot source (built from paths if not provided)
            today: Reference date provider for period filters
        """
        self._config = config or DEFAULT_CONFIG
        self._trade_repo = trade_repo or MatchedTradeRepository(paths)
        self._snapshot_repo = snapshot_repo or SnapshotRepository(
            paths, cache=TTLCache(default_ttl=self._config.snapshot_cache_ttl)
        )
        self._today = today

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def get_user_analytics(
        self,
        user_id: str,
        query: AnalyticsQuery | None = None,
    ) -> AnalyticsResult:
        """Calculate analytics for one user.

        Args:
            user_id: User identifier
            query: Filter options (no filter if None)

        Returns:
            AnalyticsResult

        Raises:
            RepositoryError: If the user's trades cannot be loaded
        """
        query = query or AnalyticsQuery()
        started = time.perf_counter()

        try:
            trades = self._trade_repo.get_user(user_id)

            precomputed = None
            if query.allows_precomputed(self._config.default_period):
                precomputed = self._snapshot_repo.get(user_id)

            result = compute_analytics(
                trades,
                query,
                precomputed=precomputed,
                today=self._today(),
                config=self._config,
            )
        except Exception as e:
            logger.error(
                "Analytics calculation failed for user %s after %.1f ms: %s",
                user_id, (time.perf_counter() - started) * 1000, e,
            )
            raise

        logger.info(
            "Analytics calculation completed for user %s: %d trades in %.1f ms "
            "(precomputed snapshot: %s)",
            user_id,
            result.summary.total_trades,
            (time.perf_counter() - started) * 1000,
            result.used_precomputed,
        )
        return result

    def default_snapshot(self, user_id: str) -> AnalyticsSnapshot:
        """Calculate a fresh snapshot over the default period.

        This is what the storage side persists for later reuse.
        """
        trades = self._trade_repo.get_user(user_id)
        query = AnalyticsQuery(period=self._config.default_period)
        filtered = filter_trades(trades, query, today=self._today())
        return calculate_snapshot(filtered, flat_policy=self._config.flat_trade_policy)
