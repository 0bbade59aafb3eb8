"""Performance Metrics: Aggregate win/loss statistics.

Single linear pass over a trade sequence producing:
- Net PNL, gross profit, gross loss
- Win/loss counts and rates
- Profit factor
- Average profit per win, loss per loss, PNL per trade

Classification:
    profit > 0   -> win
    profit < 0   -> loss
    profit == 0  -> flat (counted in total_trades only)

Profit factor:
    gross_profit / gross_loss       if gross_loss > 0
    unbounded                       if gross_loss == 0 and gross_profit > 0
    0                               otherwise
"""

from dataclasses import dataclass
from typing import Sequence

from trade_analytics.domain.models import MatchedTrade, ProfitFactor


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True, slots=True)
class PerformanceMetrics:
    """Win/loss statistics of a trade sequence.

    Attributes:
        total_net_profit_loss: Sum of all profits
        gross_profit: Sum of winning profits
        gross_loss: Sum of |losing profits| (non-negative)
        total_trades: Number of trades, flat trades included
        winning_trades: Trades with profit > 0
        losing_trades: Trades with profit < 0
        win_rate: winning_trades / total_trades * 100
        loss_rate: losing_trades / total_trades * 100
        profit_factor: gross_profit / gross_loss
        avg_profit_per_win: gross_profit / winning_trades
        avg_loss_per_loss: gross_loss / losing_trades
        avg_profit_loss_per_trade: total_net_profit_loss / total_trades
    """
    total_net_profit_loss: float
    gross_profit: float
    gross_loss: float
    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float
    loss_rate: float
    profit_factor: ProfitFactor
    avg_profit_per_win: float
    avg_loss_per_loss: float
    avg_profit_loss_per_trade: float

    @property
    def flat_trades(self) -> int:
        """Trades that were neither a win nor a loss."""
        return self.total_trades - self.winning_trades - self.losing_trades


# =============================================================================
# Core Calculation
# =============================================================================

def calculate_profit_factor(gross_profit: float, gross_loss: float) -> ProfitFactor:
    """Calculate profit factor from gross totals.

    Args:
        gross_profit: Sum of winning profits
        gross_loss: Sum of |losing profits|

    Returns:
        ProfitFactor, unbounded when there is profit but no loss

    Example:
        >>> calculate_profit_factor(300.0, 100.0).value
        3.0
        >>> calculate_profit_factor(300.0, 0.0).is_unbounded
        True
    """
    if gross_loss > 0:
        return ProfitFactor.finite(gross_profit / gross_loss)
    if gross_profit > 0:
        return ProfitFactor.unbounded()
    return ProfitFactor.finite(0.0)


def _safe_ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def calculate_performance_metrics(trades: Sequence[MatchedTrade]) -> PerformanceMetrics:
    """Calculate win/loss statistics in one pass.

    Args:
        trades: Matched trades in any order (order does not matter here)

    Returns:
        PerformanceMetrics. Empty input yields all zeros.

    Example:
        >>> metrics = calculate_performance_metrics(trades)  # [100, -50, 200, -30, -20]
        >>> metrics.total_net_profit_loss, metrics.win_rate
        (200.0, 40.0)
    """
    total_net = 0.0
    gross_profit = 0.0
    gross_loss = 0.0
    winning = 0
    losing = 0

    for trade in trades:
        total_net += trade.profit
        if trade.profit > 0:
            gross_profit += trade.profit
            winning += 1
        elif trade.profit < 0:
            gross_loss += abs(trade.profit)
            losing += 1

    total = len(trades)

    return PerformanceMetrics(
        total_net_profit_loss=total_net,
        gross_profit=gross_profit,
        gross_loss=gross_loss,
        total_trades=total,
        winning_trades=winning,
        losing_trades=losing,
        win_rate=_safe_ratio(winning, total) * 100,
        loss_rate=_safe_ratio(losing, total) * 100,
        profit_factor=calculate_profit_factor(gross_profit, gross_loss),
        avg_profit_per_win=_safe_ratio(gross_profit, winning),
        avg_loss_per_loss=_safe_ratio(gross_loss, losing),
        avg_profit_loss_per_trade=_safe_ratio(total_net, total),
    )
