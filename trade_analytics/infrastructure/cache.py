"""TTL Cache: Key -> value store with per-entry expiry.

Injected into the components that need caching (for example
SnapshotRepository) instead of living in module-level state, so tests
can pass their own clock and each process owns its instance.

Example:
    >>> cache = TTLCache(default_ttl=60)
    >>> cache.set("analytics_user_1", snapshot)
    >>> cache.get("analytics_user_1")
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL = 5 * 60.0


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Entry counts, expired entries included until they are cleared."""
    size: int
    expired: int


@dataclass(frozen=True, slots=True)
class _Entry:
    value: object
    stored_at: float
    ttl: float


class TTLCache(Generic[T]):
    """In-memory cache whose entries expire after a time-to-live.

    Args:
        default_ttl: Seconds an entry lives unless set() overrides it
        clock: Monotonic time source in seconds
    """

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        if default_ttl <= 0:
            raise ValueError(f"default_ttl must be positive, got: {default_ttl}")
        self._default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def _is_expired(self, entry: _Entry, now: float) -> bool:
        return now - entry.stored_at > entry.ttl

    def set(self, key: str, value: T, ttl: float | None = None) -> None:
        """Store a value, replacing any previous entry for the key."""
        self._entries[key] = _Entry(
            value=value,
            stored_at=self._clock(),
            ttl=self._default_ttl if ttl is None else ttl,
        )

    def get(self, key: str) -> T | None:
        """Get a value if present and not expired (expired entries are dropped)."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._is_expired(entry, self._clock()):
            del self._entries[key]
            logger.debug("Cache entry expired: %s", key)
            return None

        return entry.value

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def delete(self, key: str) -> bool:
        """Remove an entry. Returns True if it existed."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def clear_expired(self) -> int:
        """Drop all expired entries.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired = [k for k, e in self._entries.items() if self._is_expired(e, now)]
        for key in expired:
            del self._entries[key]

        if expired:
            logger.info("Cleared %d expired cache entries", len(expired))
        return len(expired)

    def stats(self) -> CacheStats:
        now = self._clock()
        expired = sum(1 for e in self._entries.values() if self._is_expired(e, now))
        return CacheStats(size=len(self._entries), expired=expired)

    def __len__(self) -> int:
        return len(self._entries)


# =============================================================================
# Key Helpers
# =============================================================================

def snapshot_cache_key(user_id: str) -> str:
    """Key of a user's stored snapshot."""
    return f"analytics_{user_id}"
