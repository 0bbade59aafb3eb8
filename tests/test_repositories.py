"""Unit tests for infrastructure: config, cache and repositories.

Tests verify:
1. DataPaths layout and validation
2. TTLCache expiry with an injected clock
3. MatchedTradeRepository parquet round trip and error handling
4. SnapshotRepository JSON storage and read-through caching
"""

import json
from dataclasses import replace
from datetime import date

import polars as pl
import pytest

from trade_analytics.domain.models import AnalyticsSnapshot, ProfitFactor
from trade_analytics.infrastructure import (
    DataPaths,
    MatchedTradeRepository,
    Repository,
    RepositoryError,
    SnapshotRepository,
    TTLCache,
    snapshot_cache_key,
)
from trade_analytics.infrastructure.repositories.trade_repo import (
    frame_to_trades,
    trades_to_frame,
)


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# =============================================================================
# Config
# =============================================================================

class TestDataPaths:
    """Tests for DataPaths."""

    def test_layout(self, tmp_path):
        paths = DataPaths(root=tmp_path)
        assert paths.user_trades_path("u1") == tmp_path / "data" / "matched_trades" / "u1.parquet"
        assert paths.user_snapshot_path("u1") == tmp_path / "data" / "snapshots" / "u1.json"

    def test_validate_missing(self, tmp_path):
        paths = DataPaths(root=tmp_path)
        assert paths.validate() == [str(paths.matched_trades_dir)]
        assert paths.list_users() == []

    def test_ensure_dirs(self, tmp_path):
        paths = DataPaths(root=tmp_path)
        paths.ensure_dirs()
        assert paths.validate() == []
        assert paths.snapshots_dir.is_dir()


# =============================================================================
# Cache
# =============================================================================

class TestTTLCache:
    """Tests for TTLCache."""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def cache(self, clock):
        return TTLCache(default_ttl=60, clock=clock)

    def test_set_get(self, cache):
        cache.set("a", 1)
        assert cache.get("a") == 1
        assert cache.has("a")
        assert len(cache) == 1

    def test_missing(self, cache):
        assert cache.get("missing") is None
        assert not cache.has("missing")

    def test_expiry(self, cache, clock):
        cache.set("a", 1)
        clock.advance(60)
        assert cache.get("a") == 1
        clock.advance(0.5)
        assert cache.get("a") is None
        assert len(cache) == 0

    def test_per_entry_ttl(self, cache, clock):
        cache.set("short", 1, ttl=5)
        cache.set("long", 2)
        clock.advance(10)
        assert cache.get("short") is None
        assert cache.get("long") == 2

    def test_delete(self, cache):
        cache.set("a", 1)
        assert cache.delete("a")
        assert not cache.delete("a")

    def test_clear(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()
        assert len(cache) == 0

    def test_clear_expired_and_stats(self, cache, clock):
        cache.set("old", 1, ttl=5)
        cache.set("new", 2)
        clock.advance(10)

        stats = cache.stats()
        assert stats.size == 2
        assert stats.expired == 1

        assert cache.clear_expired() == 1
        assert cache.stats().size == 1

    def test_invalid_ttl(self):
        with pytest.raises(ValueError, match="default_ttl"):
            TTLCache(default_ttl=0)

    def test_snapshot_key(self):
        assert snapshot_cache_key("u1") == "analytics_u1"


# =============================================================================
# Matched Trades
# =============================================================================

class TestFrameConversion:
    """Tests for trades_to_frame / frame_to_trades."""

    def test_sorted_by_sell_date(self, make_trade):
        trades = [
            make_trade(1, sell_date=date(2024, 1, 3), trade_id="c"),
            make_trade(2, sell_date=date(2024, 1, 1), trade_id="a"),
            make_trade(3, sell_date=date(2024, 1, 3), trade_id="d"),
            make_trade(4, sell_date=date(2024, 1, 2), trade_id="b"),
        ]
        result = frame_to_trades(trades_to_frame(trades))
        # Stable: same-day trades keep their order
        assert [t.trade_id for t in result] == ["a", "b", "c", "d"]

    def test_missing_required_column(self, make_trade):
        df = trades_to_frame([make_trade(1)]).drop("profit")
        with pytest.raises(RepositoryError, match="profit"):
            frame_to_trades(df)

    def test_optional_columns_default(self, make_trade):
        df = trades_to_frame([make_trade(1, sell_time="10:00")]).drop(
            ["commission", "sell_time", "duration"]
        )
        trade = frame_to_trades(df)[0]
        assert trade.commission == 0.0
        assert trade.sell_time is None
        assert trade.duration is None

    def test_string_dates(self):
        df = pl.DataFrame({
            "symbol": ["AAPL"],
            "buy_date": ["2024-01-02"],
            "sell_date": ["2024-01-03"],
            "quantity": [5.0],
            "buy_price": [10.0],
            "sell_price": [12.0],
            "profit": [10.0],
        })
        trade = frame_to_trades(df)[0]
        assert trade.sell_date == date(2024, 1, 3)


class TestMatchedTradeRepository:
    """Tests for MatchedTradeRepository."""

    @pytest.fixture
    def paths(self, tmp_path):
        return DataPaths(root=tmp_path)

    @pytest.fixture
    def repo(self, paths):
        return MatchedTradeRepository(paths)

    def test_is_repository(self, repo):
        assert isinstance(repo, Repository)

    def test_save_and_load(self, repo, paths, scenario_trades, make_trade):
        trades = scenario_trades + [make_trade(
            5, sell_date=date(2024, 1, 6), sell_time="09:30:00", duration=42.0
        )]
        repo.save_user("u1", trades)

        loaded = MatchedTradeRepository(paths).get_user("u1")
        assert loaded == trades

    def test_cached(self, repo, scenario_trades):
        repo.save_user("u1", scenario_trades)
        first = repo.get_user("u1")
        assert repo.get_user("u1") is first

        repo.clear_cache()
        assert repo.get_user("u1") is not first

    def test_save_invalidates_cache(self, repo, scenario_trades):
        repo.save_user("u1", scenario_trades)
        repo.get_user("u1")
        repo.save_user("u1", scenario_trades[:2])
        assert len(repo.get_user("u1")) == 2

    def test_missing_user(self, repo):
        with pytest.raises(RepositoryError, match="not found for user ghost") as exc:
            repo.get_user("ghost")
        assert exc.value.path.endswith("ghost.parquet")

    def test_unreadable_file(self, repo, paths):
        paths.ensure_dirs()
        paths.user_trades_path("bad").write_text("not parquet")
        with pytest.raises(RepositoryError, match="Failed to read"):
            repo.get_user("bad")

    def test_invalid_rows(self, repo, paths, make_trade):
        paths.ensure_dirs()
        df = trades_to_frame([make_trade(1)]).with_columns(pl.lit(-1.0).alias("quantity"))
        df.write_parquet(paths.user_trades_path("neg"))
        with pytest.raises(RepositoryError, match="quantity must be positive"):
            repo.get_user("neg")

    def test_get_all(self, repo, scenario_trades):
        repo.save_user("u1", scenario_trades)
        repo.save_user("u2", scenario_trades[:2])

        df = repo.get_all()
        assert len(df) == 7
        assert sorted(df["user_id"].unique().to_list()) == ["u1", "u2"]
        assert repo.list_users() == ["u1", "u2"]

    def test_get_all_empty(self, repo):
        with pytest.raises(RepositoryError, match="No matched trade data"):
            repo.get_all()


# =============================================================================
# Snapshots
# =============================================================================

class TestSnapshotRepository:
    """Tests for SnapshotRepository."""

    @pytest.fixture
    def paths(self, tmp_path):
        return DataPaths(root=tmp_path)

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def snapshot(self):
        return replace(
            AnalyticsSnapshot.empty(),
            total_trades=3,
            gross_profit=120.5,
            profit_factor=ProfitFactor.unbounded(),
        )

    def test_missing(self, paths):
        assert SnapshotRepository(paths).get("u1") is None
        assert SnapshotRepository(paths).get_all() == {}

    def test_save_and_load(self, paths, snapshot):
        SnapshotRepository(paths).save("u1", snapshot)

        raw = json.loads(paths.user_snapshot_path("u1").read_text())
        assert raw["profit_factor"] == "Infinity"

        assert SnapshotRepository(paths).get("u1") == snapshot
        assert SnapshotRepository(paths).get_all() == {"u1": snapshot}

    def test_read_through_cache(self, paths, snapshot, clock):
        """A cached snapshot is served until its entry expires."""
        SnapshotRepository(paths).save("u1", snapshot)
        repo = SnapshotRepository(paths, cache=TTLCache(default_ttl=300, clock=clock))
        assert repo.get("u1") == snapshot

        updated = replace(snapshot, total_trades=4)
        SnapshotRepository(paths).save("u1", updated)

        clock.advance(299)
        assert repo.get("u1").total_trades == 3

        clock.advance(2)
        assert repo.get("u1").total_trades == 4

    def test_clear_cache(self, paths, snapshot):
        cache = TTLCache(default_ttl=300)
        repo = SnapshotRepository(paths, cache=cache)
        repo.save("u1", snapshot)
        assert len(cache) == 1

        repo.clear_cache()
        assert len(cache) == 0

    def test_corrupt_file(self, paths):
        paths.ensure_dirs()
        paths.user_snapshot_path("u1").write_text("{not json")
        with pytest.raises(RepositoryError, match="Failed to read snapshot"):
            SnapshotRepository(paths).get("u1")

    def test_incomplete_file(self, paths):
        paths.ensure_dirs()
        paths.user_snapshot_path("u1").write_text(json.dumps({"total_trades": 1}))
        with pytest.raises(RepositoryError, match="missing fields"):
            SnapshotRepository(paths).get("u1")
