"""Simple in-memory TTL cache. No Redis needed.

Expiration is lazy: an expired entry stays in the mapping until it is read
or overwritten. Each uvicorn worker gets its own cache, which is fine here
because the store it fronts is per-worker too.
"""

import logging
import threading
import time
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 30 * 60


class TTLCache:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._store: dict[str, tuple[float, Any]] = {}
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if missing or expired."""
        with self._lock:
            if key in self._store:
                expires_at, value = self._store[key]
                if self._clock() < expires_at:
                    logger.debug("Cache hit: %s", key)
                    return value
                del self._store[key]
        logger.debug("Cache miss: %s", key)
        return None

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._store[key] = (self._clock() + self._ttl, value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
