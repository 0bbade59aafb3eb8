"""Trade Repository: Access to per-user matched trades.

Provides read access to matched_trades/{user_id}.parquet files.
Each file holds one user's closed round trips, one row per trade:

    symbol, buy_date, sell_date, buy_time, sell_time, quantity,
    buy_price, sell_price, profit, commission, duration, trade_id

Trades are returned as MatchedTrade objects sorted by sell_date.
"""

import logging
from datetime import date, datetime
from typing import Sequence

import polars as pl

from trade_analytics.domain.models import MatchedTrade
from trade_analytics.infrastructure.repositories.base import Repository, RepositoryError
from trade_analytics.infrastructure.config import DataPaths, DEFAULT_PATHS

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "symbol",
    "buy_date",
    "sell_date",
    "quantity",
    "buy_price",
    "sell_price",
    "profit",
)

OPTIONAL_COLUMNS = (
    "commission",
    "buy_time",
    "sell_time",
    "duration",
    "trade_id",
)

TRADE_SCHEMA = {
    "symbol": pl.Utf8,
    "buy_date": pl.Date,
    "sell_date": pl.Date,
    "buy_time": pl.Utf8,
    "sell_time": pl.Utf8,
    "quantity": pl.Float64,
    "buy_price": pl.Float64,
    "sell_price": pl.Float64,
    "profit": pl.Float64,
    "commission": pl.Float64,
    "duration": pl.Float64,
    "trade_id": pl.Utf8,
}


# =============================================================================
# Frame Conversion
# =============================================================================

def _as_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def trades_to_frame(trades: Sequence[MatchedTrade]) -> pl.DataFrame:
    """Convert trades to a DataFrame with TRADE_SCHEMA columns."""
    return pl.DataFrame(
        {
            "symbol": [t.symbol for t in trades],
            "buy_date": [t.buy_date for t in trades],
            "sell_date": [t.sell_date for t in trades],
            "buy_time": [t.buy_time for t in trades],
            "sell_time": [t.sell_time for t in trades],
            "quantity": [float(t.quantity) for t in trades],
            "buy_price": [float(t.buy_price) for t in trades],
            "sell_price": [float(t.sell_price) for t in trades],
            "profit": [float(t.profit) for t in trades],
            "commission": [float(t.commission) for t in trades],
            "duration": [None if t.duration is None else float(t.duration) for t in trades],
            "trade_id": [t.trade_id for t in trades],
        },
        schema=TRADE_SCHEMA,
    )


def frame_to_trades(df: pl.DataFrame) -> list[MatchedTrade]:
    """Convert a trade DataFrame to MatchedTrade objects, sorted by sell_date.

    Missing optional columns take their MatchedTrade defaults.
    The sort is stable, so trades closed on the same day keep file order.

    Raises:
        RepositoryError: If required columns are missing
        ValueError: If a row fails MatchedTrade validation
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise RepositoryError(f"Missing required columns: {', '.join(missing)}")

    columns = list(REQUIRED_COLUMNS) + [c for c in OPTIONAL_COLUMNS if c in df.columns]

    trades = []
    for row in df.select(columns).iter_rows(named=True):
        trades.append(MatchedTrade(
            symbol=row["symbol"],
            buy_date=_as_date(row["buy_date"]),
            sell_date=_as_date(row["sell_date"]),
            quantity=row["quantity"],
            buy_price=row["buy_price"],
            sell_price=row["sell_price"],
            profit=row["profit"],
            commission=row.get("commission") or 0.0,
            buy_time=row.get("buy_time"),
            sell_time=row.get("sell_time"),
            duration=row.get("duration"),
            trade_id=row.get("trade_id"),
        ))

    trades.sort(key=lambda t: t.sell_date)
    return trades


# =============================================================================
# Repository
# =============================================================================

class MatchedTradeRepository(Repository[pl.DataFrame]):
    """Repository for per-user matched trades.

    Loads data from matched_trades/{user_id}.parquet files.
    Supports loading a single user or concatenating all users.

    Example:
        >>> repo = MatchedTradeRepository()
        >>> trades = repo.get_user("user_123")  # list[MatchedTrade]
        >>> users = repo.list_users()
    """

    def __init__(self, paths: DataPaths = DEFAULT_PATHS):
        self._paths = paths
        self._user_cache: dict[str, list[MatchedTrade]] = {}

    def get_all(self) -> pl.DataFrame:
        """Load all users' trades (concatenated, with a user_id column).

        Raises:
            RepositoryError: If no trade files exist
        """
        users = self.list_users()
        if not users:
            raise RepositoryError(
                "No matched trade data found",
                str(self._paths.matched_trades_dir)
            )

        dfs = []
        for user_id in users:
            df = trades_to_frame(self.get_user(user_id))
            dfs.append(df.with_columns(pl.lit(user_id).alias("user_id")))

        return pl.concat(dfs)

    def get_user(self, user_id: str) -> list[MatchedTrade]:
        """Load one user's matched trades, sorted by sell_date.

        Args:
            user_id: User identifier

        Returns:
            List of MatchedTrade (may be empty if the file has no rows)

        Raises:
            RepositoryError: If the user has no trade file or it cannot be read
        """
        if user_id in self._user_cache:
            logger.debug("Trade cache hit for user %s", user_id)
            return self._user_cache[user_id]

        path = self._paths.user_trades_path(user_id)
        if not path.exists():
            raise RepositoryError(f"Matched trades not found for user {user_id}", str(path))

        try:
            df = pl.read_parquet(path)
            trades = frame_to_trades(df)
        except RepositoryError as e:
            raise RepositoryError(str(e), str(path)) from e
        except Exception as e:
            raise RepositoryError(f"Failed to read matched trades: {e}", str(path)) from e

        logger.debug("Loaded %d matched trades for user %s", len(trades), user_id)
        self._user_cache[user_id] = trades
        return trades

    def save_user(self, user_id: str, trades: Sequence[MatchedTrade]) -> None:
        """Write one user's trades, replacing any existing file."""
        path = self._paths.user_trades_path(user_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        trades_to_frame(trades).write_parquet(path)
        self._user_cache.pop(user_id, None)

    def list_users(self) -> list[str]:
        """Get list of all users with trade data."""
        return self._paths.list_users()

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._user_cache.clear()
