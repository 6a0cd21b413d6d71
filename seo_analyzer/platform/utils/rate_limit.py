import math
from threading import Lock
from time import monotonic
from typing import Callable, Dict, List, Protocol

WINDOW_SECONDS = 60
MAX_REQUESTS = 10
SWEEP_THRESHOLD = 1024

# Callers without a forwarded-for header share this bucket.
UNKNOWN_IDENTITY = "unknown"


class RateLimiter(Protocol):
    def admit(self, identity: str) -> bool: ...

    def retry_after(self, identity: str) -> int: ...


class SlidingWindowRateLimiter:
    """Per-identity request counter over a trailing time window."""

    def __init__(
        self,
        max_requests: int = MAX_REQUESTS,
        window_seconds: float = WINDOW_SECONDS,
        clock: Callable[[], float] = monotonic,
        sweep_threshold: int = SWEEP_THRESHOLD,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.sweep_threshold = sweep_threshold
        self._clock = clock
        self._requests: Dict[str, List[float]] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._requests)

    def _recent(self, identity: str, now: float) -> List[float]:
        # Remove old timestamps outside window
        cutoff = now - self.window_seconds
        timestamps = [ts for ts in self._requests.get(identity, []) if ts > cutoff]
        if timestamps:
            self._requests[identity] = timestamps
        else:
            self._requests.pop(identity, None)
        return timestamps

    def admit(self, identity: str) -> bool:
        now = self._clock()
        with self._lock:
            if len(self._requests) >= self.sweep_threshold:
                self._purge_idle(now)
            timestamps = self._recent(identity, now)
            if len(timestamps) >= self.max_requests:
                return False
            timestamps.append(now)
            self._requests[identity] = timestamps
            return True

    def retry_after(self, identity: str) -> int:
        """Whole seconds until the oldest request in the window ages out."""
        now = self._clock()
        with self._lock:
            timestamps = self._recent(identity, now)
            if len(timestamps) < self.max_requests:
                return 0
            wait = timestamps[0] + self.window_seconds - now
        return max(1, math.ceil(wait))

    def purge_idle(self) -> int:
        """Forget every identity with nothing left in the window; returns how many."""
        now = self._clock()
        with self._lock:
            return self._purge_idle(now)

    def _purge_idle(self, now: float) -> int:
        cutoff = now - self.window_seconds
        # timestamps are appended in order, so the last one is the newest
        idle = [identity for identity, timestamps in self._requests.items() if timestamps[-1] <= cutoff]
        for identity in idle:
            del self._requests[identity]
        return len(idle)
