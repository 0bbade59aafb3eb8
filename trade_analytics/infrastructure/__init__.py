"""Infrastructure layer for Trade Analytics.

Contains:
- config: Data paths and analysis configuration
- cache: TTL cache used by the snapshot store
- repositories: Data access abstractions
"""

from trade_analytics.infrastructure.config import (
    DataPaths,
    AnalysisConfig,
    DEFAULT_PATHS,
    DEFAULT_CONFIG,
)
from trade_analytics.infrastructure.cache import (
    CacheStats,
    TTLCache,
    snapshot_cache_key,
)
from trade_analytics.infrastructure.repositories import (
    Repository,
    RepositoryError,
    MatchedTradeRepository,
    SnapshotRepository,
)

__all__ = [
    # Config
    "DataPaths",
    "AnalysisConfig",
    "DEFAULT_PATHS",
    "DEFAULT_CONFIG",
    # Cache
    "CacheStats",
    "TTLCache",
    "snapshot_cache_key",
    # Repositories
    "Repository",
    "RepositoryError",
    "MatchedTradeRepository",
    "SnapshotRepository",
]
