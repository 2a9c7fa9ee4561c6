"""Per-locale lookup cache.

Maps (locale, flat key) to the raw lookup result, including ``None`` for
keys that were not found. Every locale has its own re-entrant lock; writes
to a locale hold that lock so readers never see an entry older than the
latest invalidation.

Lock order: the registry guard is only taken while no locale lock is
requested, and ``locked_all`` acquires locale locks in sorted order.
"""

from contextlib import contextmanager
import threading
from typing import Any, Callable, Dict, Generator, Optional


class LookupCache:
    """Thread-safe memo store for raw lookups, scoped per locale."""

    def __init__(self) -> None:
        self._entries: Dict[str, Dict[str, Any]] = {}
        self._locks: Dict[str, threading.RLock] = {}
        self._guard = threading.RLock()

    def _lock_for(self, locale: str) -> threading.RLock:
        lock = self._locks.get(locale)
        if lock is None:
            with self._guard:
                lock = self._locks.setdefault(locale, threading.RLock())
        return lock

    @contextmanager
    def locked(self, locale: str) -> Generator[None, None, None]:
        """Hold the locale's lock for a compound write."""
        with self._lock_for(locale):
            yield

    @contextmanager
    def locked_all(self) -> Generator[None, None, None]:
        """Hold every locale's lock (and block new locales) for a reload."""
        with self._guard:
            locks = [self._locks[locale] for locale in sorted(self._locks)]
            for lock in locks:
                lock.acquire()
            try:
                yield
            finally:
                for lock in reversed(locks):
                    lock.release()

    def fetch(self, locale: str, flat_key: str, compute: Callable[[], Any]) -> Any:
        """Return the cached value, computing and storing it on a miss.

        A computed ``None`` is cached as well, so repeated misses do not
        reach the backend again.
        """
        with self._lock_for(locale):
            entries = self._entries.setdefault(locale, {})
            if flat_key in entries:
                return entries[flat_key]
            value = compute()
            entries[flat_key] = value
            return value

    def contains(self, locale: str, flat_key: str) -> bool:
        with self._lock_for(locale):
            return flat_key in self._entries.get(locale, {})

    def invalidate(self, locale: str, flat_key: Optional[str] = None) -> None:
        """Drop one entry, or the whole locale when flat_key is None."""
        with self._lock_for(locale):
            if flat_key is None:
                self._entries.pop(locale, None)
            else:
                self._entries.get(locale, {}).pop(flat_key, None)

    def invalidate_all(self) -> None:
        with self.locked_all():
            self._entries.clear()

    def __len__(self) -> int:
        return sum(len(entries) for entries in list(self._entries.values()))
