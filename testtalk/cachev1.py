"""An in-memory key-value store whose entries expire after a fixed time."""

import threading
import time
from typing import Callable, Dict, Generic, Hashable, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Cache(Generic[K, V]):
    """Thread-safe mapping whose entries expire ``ttl`` seconds after being set.

    Expired entries are removed lazily when they are looked up.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._items: Dict[K, Tuple[V, float]] = {}

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, restarting its expiry timer."""
        with self._lock:
            self._items[key] = (value, self._clock() + self._ttl)

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key``, or ``None`` if it is missing or expired."""
        with self._lock:
            entry = self._items.get(key)
            if entry is None or self._clock() > entry[1]:
                self._items.pop(key, None)
                return None
            return entry[0]