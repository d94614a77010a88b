import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Generic, Optional, TypeVar

from review_parser.schemas import CacheStats

V = TypeVar("V")

@dataclass
class _CacheEntry(Generic[V]):
    value: V
    accessed_at: float

class ExpiringCache(Generic[V]):
    """
    In-memory key/value store bounded by size and idle time.

    An entry expires once it has not been read or written for ``expire_after``.
    When more than ``max_size`` entries are stored, the least recently used
    ones are evicted. Expiry is enforced lazily on access; there is no
    background sweeper.
    """

    def __init__(
        self,
        max_size: int,
        expire_after: timedelta = timedelta(days=1),
        timer: Callable[[], float] = time.monotonic,
    ):
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        if expire_after.total_seconds() <= 0:
            raise ValueError(f"expire_after must be positive, got {expire_after}")

        self._max_size = max_size
        self._ttl = expire_after.total_seconds()
        self._timer = timer
        self._entries: "OrderedDict[str, _CacheEntry[V]]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def expire_after(self) -> timedelta:
        return timedelta(seconds=self._ttl)

    def _is_expired(self, entry: _CacheEntry[V], now: float) -> bool:
        return (now - entry.accessed_at) > self._ttl

    def get(self, key: str) -> Optional[V]:
        """Return the cached value and refresh its access time, or None"""
        with self._lock:
            now = self._timer()
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            if self._is_expired(entry, now):
                del self._entries[key]
                self._misses += 1
                return None
            entry.accessed_at = now
            self._entries.move_to_end(key)
            self._hits += 1
            return entry.value

    def put(self, key: str, value: V) -> None:
        """Store value under key, replacing any previous entry"""
        with self._lock:
            self._entries[key] = _CacheEntry(value=value, accessed_at=self._timer())
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_size:
                self._entries.popitem(last=False)

    def invalidate(self, key: str) -> bool:
        """Drop a single entry. Returns True if something was removed"""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def purge_expired(self) -> int:
        """Remove every expired entry and return how many were dropped"""
        with self._lock:
            now = self._timer()
            expired = [key for key, entry in self._entries.items() if self._is_expired(entry, now)]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                total_entries=len(self._entries),
                max_size=self._max_size,
                expire_after_seconds=self._ttl,
                hits=self._hits,
                misses=self._misses,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        # Membership check only; does not refresh the entry or count a hit
        with self._lock:
            entry = self._entries.get(key)  # type: ignore[arg-type]
            return entry is not None and not self._is_expired(entry, self._timer())
