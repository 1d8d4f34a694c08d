"""An expiring key-value store with a background sweeper and removal statistics."""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class Stats:
    """Counts of entries removed by the sweeper and by lookups."""

    removed_by_sweep: int = 0
    removed_by_get: int = 0


class Cache(Generic[K, V]):
    """Thread-safe mapping whose entries expire ``ttl`` seconds after being set.

    A daemon thread calls :meth:`sweep` every ``sweep_interval`` seconds of real
    time until :meth:`done` is called. The cache is also a context manager that
    calls :meth:`done` on exit.
    """

    def __init__(
        self,
        ttl: float,
        sweep_interval: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if sweep_interval <= 0:
            raise ValueError(f"sweep interval must be positive, got {sweep_interval}")
        self._ttl = ttl
        self._sweep_interval = sweep_interval
        self._clock = clock
        self._lock = threading.Lock()
        self._items: Dict[K, Tuple[V, float]] = {}
        self.stats = Stats()
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._stopped.wait(self._sweep_interval):
            self.sweep()

    def done(self) -> None:
        """Stop the background sweeper. Calling it more than once is harmless."""
        self._stopped.set()

    def __enter__(self) -> "Cache[K, V]":
        return self

    def __exit__(self, *args) -> None:
        self.done()

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, restarting its expiry timer."""
        with self._lock:
            self._items[key] = (value, self._clock() + self._ttl)

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key``, or ``None`` if it is missing or expired."""
        with self._lock:
            entry = self._items.get(key)
            if entry is None or self._clock() > entry[1]:
                if self._items.pop(key, None) is not None:
                    self.stats.removed_by_get += 1
                return None
            return entry[0]

    def __len__(self) -> int:
        """Number of stored entries, including expired ones not yet removed."""
        with self._lock:
            return len(self._items)

    def sweep(self) -> int:
        """Remove every expired entry and return how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [key for key, (_, expires_at) in self._items.items() if now > expires_at]
            for key in expired:
                del self._items[key]
            self.stats.removed_by_sweep += len(expired)
            return len(expired)