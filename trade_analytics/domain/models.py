"""Domain Models: Core data structures for trade analytics.

These models represent the fundamental business entities:
- MatchedTrade: A closed round-trip position with realized PNL
- ProfitFactor: Gross profit / gross loss, possibly unbounded
- AnalyticsSnapshot: Aggregate scalar statistics
- ChartData: Derived series for charting

Design Principles:
- Immutable (frozen dataclass)
- Validation in __post_init__
- Computed properties for derived values
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any

# Sunday-first, matching the weekday buckets
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

DEFAULT_SELL_TIME = "00:00"

_TIME_FORMATS = ("%H:%M:%S", "%H:%M")


def _validate_positive(value: int | float, field_name: str) -> None:
    """Validate that value is positive."""
    if value <= 0:
        raise ValueError(f"{field_name} must be positive, got: {value}")


def _validate_non_negative(value: int | float, field_name: str) -> None:
    """Validate that value is non-negative."""
    if value < 0:
        raise ValueError(f"{field_name} must be non-negative, got: {value}")


def _validate_finite(value: int | float, field_name: str) -> None:
    """Validate that value is a finite number."""
    if not math.isfinite(value):
        raise ValueError(f"{field_name} must be finite, got: {value}")


def _validate_date(value: date, field_name: str) -> None:
    """Validate that value is a calendar date (not a datetime)."""
    if not isinstance(value, date) or isinstance(value, datetime):
        raise ValueError(f"{field_name} must be a date, got: {value!r}")


def parse_time_of_day(value: str) -> tuple[int, int, int]:
    """Parse an "HH:MM" or "HH:MM:SS" string.

    Returns:
        Tuple of (hour, minute, second)

    Raises:
        ValueError: If the string matches neither format
    """
    for fmt in _TIME_FORMATS:
        try:
            parsed = datetime.strptime(value.strip(), fmt)
        except ValueError:
            continue
        return parsed.hour, parsed.minute, parsed.second
    raise ValueError(f"time must be HH:MM or HH:MM:SS format, got: {value}")


# =============================================================================
# Matched Trade
# =============================================================================

@dataclass(frozen=True, slots=True)
class MatchedTrade:
    """A closed round-trip position.

    Produced by the external trade matcher; the analytics engine
    never mutates it.

    Attributes:
        symbol: Instrument identifier (non-empty)
        buy_date: Date the position was opened
        sell_date: Date the position was closed (>= buy_date)
        quantity: Units traded (must be positive)
        buy_price: Entry price (non-negative)
        sell_price: Exit price (non-negative)
        profit: Realized PNL for the round trip, before commission
        commission: Commission paid (non-negative)
        buy_time: Entry time of day ("HH:MM" or "HH:MM:SS"), optional
        sell_time: Exit time of day, optional
        duration: Minutes held, optional
        trade_id: Identifier from the source record, optional

    Example:
        >>> trade = MatchedTrade(
        ...     symbol="AAPL", buy_date=date(2024, 1, 15),
        ...     sell_date=date(2024, 1, 16), quantity=10,
        ...     buy_price=180.0, sell_price=185.0, profit=50.0,
        ...     sell_time="14:30",
        ... )
        >>> trade.sell_hour
        14
    """

    symbol: str
    buy_date: date
    sell_date: date
    quantity: float
    buy_price: float
    sell_price: float
    profit: float
    commission: float = 0.0
    buy_time: str | None = None
    sell_time: str | None = None
    duration: float | None = None
    trade_id: str | None = None

    def __post_init__(self) -> None:
        """Validate all fields after initialization."""
        if not self.symbol:
            raise ValueError("symbol cannot be empty")
        _validate_date(self.buy_date, "buy_date")
        _validate_date(self.sell_date, "sell_date")
        if self.sell_date < self.buy_date:
            raise ValueError(
                f"sell_date must not precede buy_date: "
                f"{self.sell_date} < {self.buy_date}"
            )
        _validate_positive(self.quantity, "quantity")
        _validate_non_negative(self.buy_price, "buy_price")
        _validate_non_negative(self.sell_price, "sell_price")
        _validate_finite(self.profit, "profit")
        _validate_non_negative(self.commission, "commission")
        if self.duration is not None:
            _validate_non_negative(self.duration, "duration")
        if self.buy_time:
            parse_time_of_day(self.buy_time)
        if self.sell_time:
            parse_time_of_day(self.sell_time)

    @property
    def is_win(self) -> bool:
        return self.profit > 0

    @property
    def is_loss(self) -> bool:
        return self.profit < 0

    @property
    def is_flat(self) -> bool:
        return self.profit == 0

    @property
    def net_profit(self) -> float:
        """Profit after commission (informational; statistics use profit)."""
        return self.profit - self.commission

    @property
    def sell_hour(self) -> int:
        """Hour of day the position was closed (00:00 if unknown)."""
        hour, _, _ = parse_time_of_day(self.sell_time or DEFAULT_SELL_TIME)
        return hour

    @property
    def sell_weekday(self) -> int:
        """Day of week of the sell date, Sunday = 0 ... Saturday = 6."""
        return (self.sell_date.weekday() + 1) % 7


# =============================================================================
# Profit Factor
# =============================================================================

@dataclass(frozen=True, slots=True)
class ProfitFactor:
    """Gross profit divided by gross loss.

    Unbounded when there is profit but no loss. Kept as an explicit
    variant rather than float("inf") so that downstream arithmetic and
    serialization have to handle it deliberately.

    Attributes:
        value: The finite ratio, or None when unbounded
    """

    value: float | None

    INFINITY_LABEL = "Infinity"

    @classmethod
    def finite(cls, value: float) -> ProfitFactor:
        return cls(float(value))

    @classmethod
    def unbounded(cls) -> ProfitFactor:
        return cls(None)

    @property
    def is_unbounded(self) -> bool:
        return self.value is None

    def __float__(self) -> float:
        return math.inf if self.value is None else self.value

    def to_json(self) -> float | str:
        """Finite ratio as a number, unbounded as the string "Infinity"."""
        return self.INFINITY_LABEL if self.value is None else self.value

    @classmethod
    def from_json(cls, raw: Any) -> ProfitFactor:
        if raw is None or raw == cls.INFINITY_LABEL:
            return cls.unbounded()
        value = float(raw)
        if math.isinf(value):
            return cls.unbounded()
        return cls.finite(value)

    def __str__(self) -> str:
        return "∞" if self.value is None else f"{self.value:.2f}"


# =============================================================================
# Analytics Snapshot
# =============================================================================

@dataclass(frozen=True, slots=True)
class AnalyticsSnapshot:
    """Aggregate performance statistics for one trade sequence.

    Always produced from one full pass; never partially updated.
    """
    # Totals
    total_net_profit_loss: float
    gross_profit: float
    gross_loss: float

    # Counts and rates
    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float
    loss_rate: float
    profit_factor: ProfitFactor

    # Averages
    avg_profit_per_win: float
    avg_loss_per_loss: float
    avg_profit_loss_per_trade: float

    # Drawdown
    max_drawdown: float
    max_drawdown_percent: float
    avg_drawdown: float

    # Streaks
    longest_win_streak: int
    longest_loss_streak: int

    # Days
    profitable_days: int
    loss_days: int

    @classmethod
    def empty(cls) -> AnalyticsSnapshot:
        """All-zero snapshot for an empty trade sequence."""
        return cls(
            total_net_profit_loss=0.0,
            gross_profit=0.0,
            gross_loss=0.0,
            total_trades=0,
            winning_trades=0,
            losing_trades=0,
            win_rate=0.0,
            loss_rate=0.0,
            profit_factor=ProfitFactor.finite(0.0),
            avg_profit_per_win=0.0,
            avg_loss_per_loss=0.0,
            avg_profit_loss_per_trade=0.0,
            max_drawdown=0.0,
            max_drawdown_percent=0.0,
            avg_drawdown=0.0,
            longest_win_streak=0,
            longest_loss_streak=0,
            profitable_days=0,
            loss_days=0,
        )

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (profit factor via to_json)."""
        result = {f.name: getattr(self, f.name) for f in fields(self)}
        result["profit_factor"] = self.profit_factor.to_json()
        return result

    @classmethod
    def from_dict(cls, data: dict) -> AnalyticsSnapshot:
        """Rebuild a snapshot from to_dict() output.

        Raises:
            ValueError: If a field is missing
        """
        names = [f.name for f in fields(cls)]
        missing = [name for name in names if name not in data]
        if missing:
            raise ValueError(f"snapshot is missing fields: {', '.join(missing)}")

        values = {name: data[name] for name in names}
        values["profit_factor"] = ProfitFactor.from_json(data["profit_factor"])
        return cls(**values)


# =============================================================================
# Chart Points
# =============================================================================

@dataclass(frozen=True, slots=True)
class EquityPoint:
    """Cumulative PNL after one trade."""
    date: str
    value: float
    trade: float


@dataclass(frozen=True, slots=True)
class DailyPnLPoint:
    """Summed PNL of all trades closed on one day."""
    date: str
    pnl: float
    color: str


@dataclass(frozen=True, slots=True)
class DistributionPoint:
    """One slice of the win/loss pie."""
    name: str
    value: int
    color: str


@dataclass(frozen=True, slots=True)
class HistogramBin:
    """One equal-width range of the profit/loss histogram."""
    range: str
    count: int
    min_value: float
    max_value: float


@dataclass(frozen=True, slots=True)
class BucketPerformance:
    """Performance of the trades sharing an hour or a weekday.

    Attributes:
        label: Bucket label ("14:00", "Monday", ...)
        avg_pnl: total_pnl / trades
        total_pnl: Summed PNL
        trades: Number of trades in the bucket
    """
    label: str
    avg_pnl: float
    total_pnl: float
    trades: int


@dataclass(frozen=True, slots=True)
class SymbolPerformance:
    """Performance of the trades in one symbol."""
    symbol: str
    total_pnl: float
    trades: int
    avg_pnl: float


@dataclass(frozen=True, slots=True)
class ChartData:
    """Derived chart series, recomputed in full for every request."""
    equity_curve: list[EquityPoint] = field(default_factory=list)
    daily_pnl: list[DailyPnLPoint] = field(default_factory=list)
    win_loss_distribution: list[DistributionPoint] = field(default_factory=list)
    profit_loss_distribution: list[HistogramBin] = field(default_factory=list)
    hourly_performance: list[BucketPerformance] = field(default_factory=list)
    weekly_performance: list[BucketPerformance] = field(default_factory=list)
    symbol_performance: list[SymbolPerformance] = field(default_factory=list)

    @classmethod
    def empty(cls) -> ChartData:
        return cls()

    def to_dict(self) -> dict:
        """Convert to plain dictionaries and lists."""
        return {
            "equity_curve": [
                {"date": p.date, "value": p.value, "trade": p.trade}
                for p in self.equity_curve
            ],
            "daily_pnl": [
                {"date": p.date, "pnl": p.pnl, "color": p.color}
                for p in self.daily_pnl
            ],
            "win_loss_distribution": [
                {"name": p.name, "value": p.value, "color": p.color}
                for p in self.win_loss_distribution
            ],
            "profit_loss_distribution": [
                {
                    "range": b.range,
                    "count": b.count,
                    "min_value": b.min_value,
                    "max_value": b.max_value,
                }
                for b in self.profit_loss_distribution
            ],
            "hourly_performance": [
                {"hour": b.label, "avg_pnl": b.avg_pnl,
                 "total_pnl": b.total_pnl, "trades": b.trades}
                for b in self.hourly_performance
            ],
            "weekly_performance": [
                {"day": b.label, "avg_pnl": b.avg_pnl,
                 "total_pnl": b.total_pnl, "trades": b.trades}
                for b in self.weekly_performance
            ],
            "symbol_performance": [
                {"symbol": s.symbol, "total_pnl": s.total_pnl,
                 "trades": s.trades, "avg_pnl": s.avg_pnl}
                for s in self.symbol_performance
            ],
        }
