"""Snapshot: Assemble all scalar metrics into one AnalyticsSnapshot.

Combines the outputs of:
- calculate_performance_metrics (win/loss statistics)
- calculate_drawdown
- calculate_streaks
- calculate_daily_metrics
"""

from typing import Sequence

from trade_analytics.domain.models import AnalyticsSnapshot, MatchedTrade
from trade_analytics.domain.metrics.performance import calculate_performance_metrics
from trade_analytics.domain.metrics.drawdown import calculate_drawdown
from trade_analytics.domain.metrics.streaks import FlatTradePolicy, calculate_streaks
from trade_analytics.domain.metrics.daily import calculate_daily_metrics


def calculate_snapshot(
    trades: Sequence[MatchedTrade],
    flat_policy: FlatTradePolicy = "neutral",
) -> AnalyticsSnapshot:
    """Calculate the full analytics snapshot for a trade sequence.

    Args:
        trades: Matched trades in sell-date order
        flat_policy: Streak policy for zero-profit trades

    Returns:
        AnalyticsSnapshot. Empty input yields AnalyticsSnapshot.empty().
    """
    if not trades:
        return AnalyticsSnapshot.empty()

    performance = calculate_performance_metrics(trades)
    drawdown = calculate_drawdown(trades)
    streaks = calculate_streaks(trades, flat_policy=flat_policy)
    daily = calculate_daily_metrics(trades)

    return AnalyticsSnapshot(
        total_net_profit_loss=performance.total_net_profit_loss,
        gross_profit=performance.gross_profit,
        gross_loss=performance.gross_loss,
        total_trades=performance.total_trades,
        winning_trades=performance.winning_trades,
        losing_trades=performance.losing_trades,
        win_rate=performance.win_rate,
        loss_rate=performance.loss_rate,
        profit_factor=performance.profit_factor,
        avg_profit_per_win=performance.avg_profit_per_win,
        avg_loss_per_loss=performance.avg_loss_per_loss,
        avg_profit_loss_per_trade=performance.avg_profit_loss_per_trade,
        max_drawdown=drawdown.max_drawdown,
        max_drawdown_percent=drawdown.max_drawdown_percent,
        avg_drawdown=drawdown.avg_drawdown,
        longest_win_streak=streaks.longest_win_streak,
        longest_loss_streak=streaks.longest_loss_streak,
        profitable_days=daily.profitable_days,
        loss_days=daily.loss_days,
    )
