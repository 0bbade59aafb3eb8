"""Drawdown: Peak-to-trough analysis of the equity curve.

Walks the trades in order, tracking:
    running[i]  = running[i-1] + profit[i]
    peak[i]     = max(peak[i-1], running[i])      (peak starts at 0)
    drawdown[i] = peak[i] - running[i]            (always >= 0)

Outputs:
- max_drawdown: max(drawdown)
- avg_drawdown: mean(drawdown) over every trade
- max_drawdown_percent: max_drawdown / final peak * 100, 0 if peak == 0

The starting equity of 0 counts as a peak, so an account that only
loses still reports a drawdown (but a 0 percent, since peak == 0).
"""

from dataclasses import dataclass
from typing import Sequence

from trade_analytics.domain.models import MatchedTrade


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True, slots=True)
class DrawdownPoint:
    """Equity state after one trade.

    Attributes:
        running_pnl: Cumulative PNL up to and including this trade
        peak: Highest cumulative PNL so far (>= 0)
        drawdown: peak - running_pnl
    """
    running_pnl: float
    peak: float
    drawdown: float


@dataclass(frozen=True, slots=True)
class DrawdownStats:
    """Drawdown summary of a trade sequence.

    Attributes:
        max_drawdown: Largest drawdown seen
        max_drawdown_percent: max_drawdown relative to the final peak
        avg_drawdown: Mean drawdown over all trades
        peak: Highest cumulative PNL reached (0 if never positive)
    """
    max_drawdown: float
    max_drawdown_percent: float
    avg_drawdown: float
    peak: float

    @property
    def in_drawdown(self) -> bool:
        return self.max_drawdown > 0


# =============================================================================
# Core Calculation
# =============================================================================

def drawdown_series(trades: Sequence[MatchedTrade]) -> list[DrawdownPoint]:
    """Calculate the equity state after each trade.

    Args:
        trades: Matched trades in sell-date order

    Returns:
        One DrawdownPoint per trade

    Example:
        >>> [p.drawdown for p in drawdown_series(trades)]  # [100, -50, 200, -30, -20]
        [0.0, 50.0, 0.0, 30.0, 50.0]
    """
    running = 0.0
    peak = 0.0
    points = []

    for trade in trades:
        running += trade.profit
        peak = max(peak, running)
        points.append(DrawdownPoint(
            running_pnl=running,
            peak=peak,
            drawdown=peak - running,
        ))

    return points


def calculate_drawdown(trades: Sequence[MatchedTrade]) -> DrawdownStats:
    """Calculate max/average drawdown of a trade sequence.

    Args:
        trades: Matched trades in sell-date order

    Returns:
        DrawdownStats. Empty input yields all zeros.
    """
    points = drawdown_series(trades)
    if not points:
        return DrawdownStats(
            max_drawdown=0.0,
            max_drawdown_percent=0.0,
            avg_drawdown=0.0,
            peak=0.0,
        )

    drawdowns = [p.drawdown for p in points]
    max_drawdown = max(drawdowns)
    peak = points[-1].peak

    return DrawdownStats(
        max_drawdown=max_drawdown,
        max_drawdown_percent=(max_drawdown / peak) * 100 if peak > 0 else 0.0,
        avg_drawdown=sum(drawdowns) / len(drawdowns),
        peak=peak,
    )
