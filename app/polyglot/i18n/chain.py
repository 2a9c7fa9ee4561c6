"""Backend that chains several other backends.

Each backend is asked in order. The first leaf result wins; mapping results
(namespace lookups) from several backends are merged, earlier backends taking
precedence over later ones. Defaults are only honored by the last backend, so
an intermediate backend never substitutes a default for a key a later
backend has.

    # Database-managed overrides in front of static files
    chain = ChainBackend(DatabaseBackend(), MemoizedInMemoryBackend(load_path=files))
"""

from typing import Any, Dict, List, Mapping, Optional

from polyglot.i18n.backend import Backend
from polyglot.i18n.errors import InvalidLocale
from polyglot.i18n.result import Found, Missing, Resolution
from polyglot.logging import get_module_logger

logger = get_module_logger()


class ChainBackend(Backend):
    """Backend delegating to an ordered, mutable list of backends.

    Attributes:
        backends: Backends in lookup order; the first one receives writes.
    """

    def __init__(self, *backends: Backend):
        super().__init__()
        self.backends: List[Backend] = list(backends)
        logger.info(
            "chain_backend_created",
            backends=[type(backend).__name__ for backend in self.backends],
        )

    @property
    def initialized(self) -> bool:
        return all(getattr(backend, "initialized", True) for backend in self.backends)

    def reload(self) -> None:
        for backend in self.backends:
            backend.reload()

    def reload_entry(
        self, locale: Any, key: Any, options: Optional[Dict[str, Any]] = None
    ) -> bool:
        for backend in self.backends:
            backend.reload_entry(locale, key, options)
        return True

    def store_translations(
        self,
        locale: Any,
        data: Mapping[str, Any],
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.backends[0].store_translations(locale, data, options)

    def available_locales(self) -> List[str]:
        locales: List[str] = []
        for backend in self.backends:
            for locale in backend.available_locales():
                if locale not in locales:
                    locales.append(locale)
        return locales

    def exists(self, locale: Any, key: Any) -> bool:
        return any(backend.exists(locale, key) for backend in self.backends)

    def lookup(
        self,
        locale: Any,
        key: Any,
        scope: Any = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Return the first raw value any backend has for the key."""
        for backend in self.backends:
            result = backend.lookup(locale, key, scope, options)
            if result is not None:
                return result
        return None

    def translate(
        self,
        locale: Any,
        key: Any,
        options: Optional[Dict[str, Any]] = None,
    ) -> Resolution:
        if not locale:
            raise InvalidLocale(locale)

        default_options = dict(options or {})
        namespace: Optional[Dict[str, Any]] = None
        last = len(self.backends) - 1

        for index, backend in enumerate(self.backends):
            if index == last:
                backend_options = default_options
            else:
                backend_options = {
                    name: value
                    for name, value in default_options.items()
                    if name != "default"
                }

            outcome = backend.translate(locale, key, backend_options)
            if not outcome.is_found:
                continue

            translation = outcome.content
            if self._namespace_lookup(translation, backend_options):
                merged = dict(translation)
                merged.update(namespace or {})
                namespace = merged
            else:
                return outcome

        if namespace is not None:
            return Found(namespace)
        return Missing(locale, key, default_options)

    def localize(
        self,
        locale: Any,
        obj: Any,
        format: Any = "default",
        options: Optional[Dict[str, Any]] = None,
    ) -> Resolution:
        for backend in self.backends:
            outcome = backend.localize(locale, obj, format, options)
            if outcome.is_found:
                return outcome
        return Missing(locale, format, dict(options or {}))

    def _namespace_lookup(self, result: Any, options: Dict[str, Any]) -> bool:
        return isinstance(result, Mapping) and "count" not in options
