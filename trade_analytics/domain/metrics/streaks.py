"""Streaks: Longest runs of consecutive winning or losing trades.

A win extends the current win streak and ends the loss streak;
a loss does the opposite. What a flat trade (profit == 0) does
depends on the policy:

- "neutral": leaves both current streaks untouched, so
  [win, flat, win] is a win streak of 2
- "reset": ends both current streaks, so [win, flat, win]
  is a win streak of 1

"neutral" is the default.
"""

from dataclasses import dataclass
from typing import Literal, Sequence

from trade_analytics.domain.models import MatchedTrade

FlatTradePolicy = Literal["neutral", "reset"]

FLAT_TRADE_POLICIES: tuple[str, ...] = ("neutral", "reset")


@dataclass(frozen=True, slots=True)
class StreakStats:
    """Longest win and loss streaks."""
    longest_win_streak: int
    longest_loss_streak: int


def calculate_streaks(
    trades: Sequence[MatchedTrade],
    flat_policy: FlatTradePolicy = "neutral",
) -> StreakStats:
    """Calculate the longest win and loss streaks.

    Args:
        trades: Matched trades in sell-date order
        flat_policy: How a zero-profit trade affects running streaks

    Returns:
        StreakStats. Empty input yields zeros.

    Raises:
        ValueError: If flat_policy is not recognized

    Example:
        >>> calculate_streaks(trades)  # [100, -50, 200, -30, -20]
        StreakStats(longest_win_streak=1, longest_loss_streak=2)
    """
    if flat_policy not in FLAT_TRADE_POLICIES:
        raise ValueError(
            f"flat_policy must be one of {FLAT_TRADE_POLICIES}, got: {flat_policy}"
        )

    longest_win = 0
    longest_loss = 0
    current_win = 0
    current_loss = 0

    for trade in trades:
        if trade.profit > 0:
            current_win += 1
            current_loss = 0
            longest_win = max(longest_win, current_win)
        elif trade.profit < 0:
            current_loss += 1
            current_win = 0
            longest_loss = max(longest_loss, current_loss)
        elif flat_policy == "reset":
            current_win = 0
            current_loss = 0

    return StreakStats(
        longest_win_streak=longest_win,
        longest_loss_streak=longest_loss,
    )
