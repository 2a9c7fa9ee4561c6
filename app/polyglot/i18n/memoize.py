"""Memoized lookups for translation backends.

``Memoize`` is a mixin placed before a backend class in the MRO. It caches
raw lookups by normalized flat key, per locale, and invalidates the cache at
every write or reload boundary:

- ``store_translations(locale, ...)`` drops the whole cache for that locale
- ``reload()`` drops every locale
- ``reload_entry(locale, key)`` drops exactly one entry

    class MemoizedDatabaseBackend(Memoize, DatabaseBackend):
        pass
"""

import threading
from typing import Any, Dict, List, Mapping, Optional

from polyglot.i18n.cache import LookupCache
from polyglot.i18n.keys import normalize_flat_keys
from polyglot.i18n.memory import InMemoryBackend
from polyglot.logging import get_module_logger

logger = get_module_logger()


class Memoize:
    """Mixin caching a backend's raw lookups.

    Attributes:
        lookup_cache: LookupCache holding memoized lookup results.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.lookup_cache = LookupCache()
        self._memoized_locales: Optional[List[str]] = None
        self._locales_lock = threading.RLock()

    def available_locales(self) -> List[str]:
        self._ensure_initialized()
        with self._locales_lock:
            if self._memoized_locales is None:
                self._memoized_locales = list(super().available_locales())
            return list(self._memoized_locales)

    def store_translations(
        self,
        locale: Any,
        data: Mapping[str, Any],
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        with self.lookup_cache.locked(str(locale)):
            self.reset_memoizations(locale)
            super().store_translations(locale, data, options)

    def reload(self) -> None:
        with self.lookup_cache.locked_all():
            self.reset_memoizations()
            super().reload()

    def reload_entry(
        self, locale: Any, key: Any, options: Optional[Dict[str, Any]] = None
    ) -> bool:
        options = dict(options or {})
        with self.lookup_cache.locked(str(locale)):
            self.reset_memoization_entry(
                locale, key, options.get("scope"), options.get("separator")
            )
            return super().reload_entry(locale, key, options)

    def lookup(
        self,
        locale: Any,
        key: Any,
        scope: Any = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        options = dict(options or {})
        self._ensure_initialized()

        separator = options.get("separator") or self.default_separator
        flat_key = normalize_flat_keys(locale, key, scope, separator)
        raw_lookup = super().lookup
        return self.lookup_cache.fetch(
            str(locale), flat_key, lambda: raw_lookup(locale, key, scope, options)
        )

    def _ensure_initialized(self) -> None:
        # Lazy loading writes to the store; it must run outside the cache locks.
        if not getattr(self, "initialized", True):
            self.init_translations()

    def reset_memoizations(self, locale: Any = None) -> None:
        """Forget memoized lookups for one locale, or for all of them."""
        with self._locales_lock:
            self._memoized_locales = None
        if locale is None:
            self.lookup_cache.invalidate_all()
        else:
            self.lookup_cache.invalidate(str(locale))
        logger.debug("memoization_reset", locale=str(locale) if locale else None)

    def reset_memoization_entry(
        self, locale: Any, key: Any, scope: Any = None, separator: Optional[str] = None
    ) -> None:
        """Forget the memoized lookup of a single key."""
        flat_key = normalize_flat_keys(
            locale, key, scope, separator or self.default_separator
        )
        self.lookup_cache.invalidate(str(locale), flat_key)


class MemoizedInMemoryBackend(Memoize, InMemoryBackend):
    """InMemoryBackend with memoized lookups."""
