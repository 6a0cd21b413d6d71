"""
Process-lifetime result cache.

Entries are keyed by the literal URL string the caller analyzed and expire
after a fixed TTL. Nothing survives a restart.
"""
from dataclasses import dataclass
from threading import Lock
from time import monotonic
from typing import Any, Callable, Dict, Optional, Protocol


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    stored_at: float


class ResultCache(Protocol):
    def get(self, key: str) -> Optional[CacheEntry]: ...

    def put(self, key: str, value: Any) -> CacheEntry: ...


class InMemoryResultCache:
    def __init__(
        self,
        ttl_seconds: float = 3600,
        sweep_threshold: int = 1024,
        clock: Callable[[], float] = monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.sweep_threshold = sweep_threshold
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def _is_live(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.stored_at < self.ttl_seconds

    def get(self, key: str) -> Optional[CacheEntry]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not self._is_live(entry, now):
                del self._entries[key]
                return None
            return entry

    def put(self, key: str, value: Any) -> CacheEntry:
        now = self._clock()
        entry = CacheEntry(key=key, value=value, stored_at=now)
        with self._lock:
            if len(self._entries) >= self.sweep_threshold:
                self._purge_expired(now)
            self._entries[key] = entry
        return entry

    def purge_expired(self) -> int:
        """Drop every expired entry; returns how many were removed."""
        now = self._clock()
        with self._lock:
            return self._purge_expired(now)

    def _purge_expired(self, now: float) -> int:
        expired = [key for key, entry in self._entries.items() if not self._is_live(entry, now)]
        for key in expired:
            del self._entries[key]
        return len(expired)
