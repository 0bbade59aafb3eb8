"""Shared fixtures for trade analytics tests."""

from datetime import date, timedelta

import pytest

from trade_analytics.domain.models import MatchedTrade

# Monday
BASE_DATE = date(2024, 1, 1)


def build_trade(
    profit: float,
    sell_date: date = BASE_DATE,
    symbol: str = "AAPL",
    sell_time: str | None = None,
    **kwargs,
) -> MatchedTrade:
    """Build a valid MatchedTrade with sensible defaults."""
    fields = {
        "symbol": symbol,
        "buy_date": kwargs.pop("buy_date", sell_date),
        "sell_date": sell_date,
        "quantity": 10,
        "buy_price": 100.0,
        "sell_price": 100.0 + profit / 10,
        "profit": profit,
        "sell_time": sell_time,
    }
    fields.update(kwargs)
    return MatchedTrade(**fields)


@pytest.fixture
def make_trade():
    """Factory fixture: make_trade(profit, sell_date=..., symbol=..., sell_time=...)."""
    return build_trade


@pytest.fixture
def scenario_trades():
    """Profits [100, -50, 200, -30, -20] on consecutive days from Monday 2024-01-01."""
    profits = [100, -50, 200, -30, -20]
    return [
        build_trade(p, sell_date=BASE_DATE + timedelta(days=i))
        for i, p in enumerate(profits)
    ]
