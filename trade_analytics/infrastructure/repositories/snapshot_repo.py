"""Snapshot Repository: Access to precomputed analytics snapshots.

Provides read/write access to snapshots/{user_id}.json.
Each file holds one AnalyticsSnapshot (AnalyticsSnapshot.to_dict()
format) computed over the default 1y window.

Reads go through an injected TTLCache keyed "analytics_{user_id}".
Writes replace the file and the cache entry together; the analytics
service itself only ever reads.
"""

import json
import logging

from trade_analytics.domain.models import AnalyticsSnapshot
from trade_analytics.infrastructure.cache import TTLCache, snapshot_cache_key
from trade_analytics.infrastructure.repositories.base import Repository, RepositoryError
from trade_analytics.infrastructure.config import (
    DataPaths,
    DEFAULT_PATHS,
    DEFAULT_CONFIG,
)

logger = logging.getLogger(__name__)


class SnapshotRepository(Repository[dict[str, AnalyticsSnapshot]]):
    """Repository for stored analytics snapshots.

    Example:
        >>> repo = SnapshotRepository()
        >>> snapshot = repo.get("user_123")  # AnalyticsSnapshot or None
        >>> repo.save("user_123", snapshot)
    """

    def __init__(
        self,
        paths: DataPaths = DEFAULT_PATHS,
        cache: TTLCache[AnalyticsSnapshot] | None = None,
    ):
        self._paths = paths
        self._cache = cache if cache is not None else TTLCache(
            default_ttl=DEFAULT_CONFIG.snapshot_cache_ttl
        )

    def get_all(self) -> dict[str, AnalyticsSnapshot]:
        """Load every stored snapshot.

        Returns:
            Dict mapping user_id to AnalyticsSnapshot
        """
        if not self._paths.snapshots_dir.exists():
            return {}

        snapshots = {}
        for path in sorted(self._paths.snapshots_dir.glob("*.json")):
            snapshot = self.get(path.stem)
            if snapshot is not None:
                snapshots[path.stem] = snapshot
        return snapshots

    def get(self, user_id: str) -> AnalyticsSnapshot | None:
        """Load a user's stored snapshot.

        Args:
            user_id: User identifier

        Returns:
            AnalyticsSnapshot, or None if none is stored

        Raises:
            RepositoryError: If the file exists but cannot be parsed
        """
        key = snapshot_cache_key(user_id)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Snapshot cache hit for user %s", user_id)
            return cached

        path = self._paths.user_snapshot_path(user_id)
        if not path.exists():
            return None

        try:
            with open(path, encoding="utf-8") as f:
                snapshot = AnalyticsSnapshot.from_dict(json.load(f))
        except Exception as e:
            raise RepositoryError(f"Failed to read snapshot: {e}", str(path)) from e

        self._cache.set(key, snapshot)
        return snapshot

    def save(self, user_id: str, snapshot: AnalyticsSnapshot) -> None:
        """Store a user's snapshot, replacing the file and cache entry."""
        path = self._paths.user_snapshot_path(user_id)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(snapshot.to_dict(), f, indent=2)

        self._cache.set(snapshot_cache_key(user_id), snapshot)
        logger.info("Stored analytics snapshot for user %s", user_id)

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._cache.clear()
