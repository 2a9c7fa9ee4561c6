"""Translation service for retrieving localized content.

The Translator is the outermost call boundary of the engine: it supplies the
default locale and turns a Missing outcome into a MissingTranslation error,
or into None when the caller asked for non-raising behavior.
"""

from typing import Any, List, Mapping, Optional

from polyglot.i18n.backend import Backend
from polyglot.i18n.result import Resolution
from polyglot.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating keys and localizing dates.

    Attributes:
        backend: Backend (or ChainBackend) resolving translations.
        default_locale: Locale used when a call does not name one.
        raise_on_missing: Whether missing translations raise by default.
    """

    def __init__(
        self,
        backend: Backend,
        default_locale: Optional[str] = "en",
        raise_on_missing: bool = True,
    ):
        """Initialize Translator.

        Args:
            backend: Backend resolving translations.
            default_locale: Locale used when a call does not name one.
            raise_on_missing: Raise MissingTranslation (True) or return None
                (False) when nothing can be resolved.
        """
        self.backend = backend
        self.default_locale = default_locale
        self.raise_on_missing = raise_on_missing
        logger.info(
            "initialized_translator",
            backend=type(backend).__name__,
            default_locale=default_locale,
        )

    def translate(
        self,
        key: Any,
        locale: Optional[str] = None,
        raise_on_missing: Optional[bool] = None,
        **options: Any,
    ) -> Any:
        """Resolve a key into localized content.

        Args:
            key: Dotted key string or list of segments (None with a default).
            locale: Locale to translate to (default: default_locale).
            raise_on_missing: Override the translator's missing behavior.
            **options: scope, default, separator, resolve, object, count and
                interpolation values.

        Returns:
            Translated content, or None when missing and not raising.

        Raises:
            InvalidLocale: If no locale is given and there is no default.
            MissingTranslation: If nothing resolves and raising is enabled.
            InvalidPluralizationData: If a plural entry lacks the needed form.
        """
        locale = locale or self.default_locale
        outcome = self.backend.translate(locale, key, options)
        return self._finish(outcome, raise_on_missing)

    t = translate

    def localize(
        self,
        obj: Any,
        format: Any = "default",
        locale: Optional[str] = None,
        raise_on_missing: Optional[bool] = None,
        **options: Any,
    ) -> Optional[str]:
        """Format a date, datetime or time for a locale.

        Args:
            obj: Object with a strftime method.
            format: Named format (e.g. "short") or literal strftime format.
            locale: Locale to use (default: default_locale).
            raise_on_missing: Override the translator's missing behavior.

        Returns:
            Formatted string, or None when missing and not raising.
        """
        locale = locale or self.default_locale
        outcome = self.backend.localize(locale, obj, format, options)
        return self._finish(outcome, raise_on_missing)

    l = localize  # noqa: E741

    def exists(self, key: Any, locale: Optional[str] = None) -> bool:
        """Check whether a raw translation is stored for a key."""
        return self.backend.exists(locale or self.default_locale, key)

    def store_translations(
        self, locale: str, data: Mapping[str, Any], **options: Any
    ) -> None:
        """Store translations for a locale in the backend."""
        self.backend.store_translations(locale, data, options)
        logger.info("stored_translations", locale=locale, key_count=len(data))

    def load_translations(self, *filenames: Any) -> None:
        """Load translation files into the backend."""
        self.backend.load_translations(*filenames)

    def available_locales(self) -> List[str]:
        return self.backend.available_locales()

    def reload(self) -> None:
        """Reload all translations."""
        self.backend.reload()
        logger.info("reloaded_all_translations")

    def reload_entry(
        self, key: Any, locale: Optional[str] = None, **options: Any
    ) -> bool:
        """Invalidate one entry after it changed in the underlying store."""
        return self.backend.reload_entry(locale or self.default_locale, key, options)

    def _finish(self, outcome: Resolution, raise_on_missing: Optional[bool]) -> Any:
        if outcome.is_found:
            return outcome.content

        should_raise = (
            self.raise_on_missing if raise_on_missing is None else raise_on_missing
        )
        logger.warning(
            "translation_not_found",
            key=str(outcome.key),
            locale=str(outcome.locale),
            raised=should_raise,
        )
        if should_raise:
            raise outcome.to_error()
        return None
