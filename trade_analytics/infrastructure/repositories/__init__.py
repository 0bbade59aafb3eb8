"""Data repositories for Trade Analytics.

Provides abstracted data access through the Repository pattern:
- MatchedTradeRepository: Per-user matched trades (parquet)
- SnapshotRepository: Precomputed analytics snapshots (JSON)
"""

from trade_analytics.infrastructure.repositories.base import Repository, RepositoryError
from trade_analytics.infrastructure.repositories.trade_repo import (
    MatchedTradeRepository,
    frame_to_trades,
    trades_to_frame,
)
from trade_analytics.infrastructure.repositories.snapshot_repo import SnapshotRepository

__all__ = [
    "Repository",
    "RepositoryError",
    "MatchedTradeRepository",
    "frame_to_trades",
    "trades_to_frame",
    "SnapshotRepository",
]
