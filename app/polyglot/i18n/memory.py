"""In-memory translation backend.

Stores translations as one nested dict per locale. Files on the load path
are read lazily, on the first lookup.
"""

from typing import Any, Dict, List, Mapping, Optional

from polyglot.i18n.backend import Backend
from polyglot.i18n.keys import normalize_keys
from polyglot.i18n.models import SymbolicRef
from polyglot.logging import get_module_logger

logger = get_module_logger()

# Locale subtree holding metadata rather than translations
META_KEY = "i18n"


class InMemoryBackend(Backend):
    """Backend keeping translations in a nested dict.

    Example:
        backend = InMemoryBackend()
        backend.store_translations("en", {"greeting": "Hello %{name}"})
        backend.translate("en", "greeting", {"name": "Ada"}).unwrap()
        # => "Hello Ada"
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._translations: Dict[str, Dict[str, Any]] = {}
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def translations(self) -> Dict[str, Dict[str, Any]]:
        """Stored translations, keyed by locale."""
        return self._translations

    def init_translations(self) -> None:
        """Load the load path and mark the backend initialized."""
        self.load_translations()
        self._initialized = True
        logger.info(
            "translations_loaded",
            file_count=len(self.load_path),
            locale_count=len(self._translations),
        )

    def store_translations(
        self,
        locale: Any,
        data: Mapping[str, Any],
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Deep-merge data into the locale's translations.

        Nested mappings merge key by key; any other value replaces what was
        stored at that key.
        """
        tree = self._translations.setdefault(str(locale), {})
        _deep_merge(tree, data)

    def available_locales(self) -> List[str]:
        if not self._initialized:
            self.init_translations()
        return [
            locale
            for locale, data in self._translations.items()
            if data and set(data) != {META_KEY}
        ]

    def reload(self) -> None:
        self._initialized = False
        self._translations = {}
        super().reload()

    def lookup(
        self,
        locale: Any,
        key: Any,
        scope: Any = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Walk the key path through the stored tree.

        A SymbolicRef met before the last segment is followed with a raw
        lookup of its key and the walk continues from there. A SymbolicRef
        at the last segment is returned as is, so the result never depends
        on count or interpolation options.
        """
        if not self._initialized:
            self.init_translations()

        options = dict(options or {})
        separator = options.get("separator") or self.default_separator
        segments = normalize_keys(locale, key, scope, separator)
        result: Any = self._translations
        for index, segment in enumerate(segments):
            if not isinstance(result, Mapping) or segment not in result:
                return None
            result = result[segment]
            if index < len(segments) - 1:
                result = self._follow_links(locale, result, separator)
        return result

    def _follow_links(self, locale: Any, value: Any, separator: str) -> Any:
        seen = set()
        while isinstance(value, SymbolicRef):
            if value in seen:
                return None
            seen.add(value)
            value = self.lookup(locale, value.key, None, {"separator": separator})
        return value


def _deep_merge(target: Dict[str, Any], data: Mapping[str, Any]) -> None:
    for key, value in data.items():
        key = str(key)
        if isinstance(value, Mapping):
            existing = target.get(key)
            if not isinstance(existing, dict):
                existing = target[key] = {}
            _deep_merge(existing, value)
        else:
            target[key] = value
