"""Equity curve and win/loss distribution series."""

from typing import Sequence

from trade_analytics.domain.models import DistributionPoint, EquityPoint, MatchedTrade

WIN_COLOR = "#22c55e"
LOSS_COLOR = "#ef4444"


def equity_curve(trades: Sequence[MatchedTrade]) -> list[EquityPoint]:
    """Cumulative PNL after each trade, in input order."""
    points = []
    running = 0.0

    for trade in trades:
        running += trade.profit
        points.append(EquityPoint(
            date=trade.sell_date.isoformat(),
            value=running,
            trade=trade.profit,
        ))

    return points


def win_loss_distribution(trades: Sequence[MatchedTrade]) -> list[DistributionPoint]:
    """Winning vs losing trade counts. Flat trades appear in neither slice."""
    if not trades:
        return []

    wins = sum(1 for t in trades if t.profit > 0)
    losses = sum(1 for t in trades if t.profit < 0)

    return [
        DistributionPoint(name="Winning Trades", value=wins, color=WIN_COLOR),
        DistributionPoint(name="Losing Trades", value=losses, color=LOSS_COLOR),
    ]
