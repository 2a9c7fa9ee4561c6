"""Exceptions raised by the translation engine.

All engine errors inherit from I18nError. Missing translations are not raised
inside the engine; they travel as ``Missing`` outcomes and only become a
``MissingTranslation`` exception at the outermost call boundary.
"""

from typing import Any, Mapping, Optional

from polyglot.i18n.keys import normalize_keys


class I18nError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            translator.translate("greeting", locale="fr")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidLocale(I18nError, ValueError):
    """Raised when a translation is requested without a locale."""

    def __init__(self, locale: Any):
        self.locale = locale
        super().__init__(f"{locale!r} is not a valid locale")


class MissingTranslation(I18nError, KeyError):
    """Raised when no content could be resolved for a key.

    Example:
        >>> translator.translate("nonexistent", locale="en")
        Traceback (most recent call last):
        ...
        MissingTranslation: translation missing: en.nonexistent
    """

    def __init__(
        self,
        locale: Any,
        key: Any,
        options: Optional[Mapping[str, Any]] = None,
    ):
        self.locale = locale
        self.key = key
        self.options = dict(options or {})
        self.keys = normalize_keys(
            locale,
            key,
            self.options.get("scope"),
            self.options.get("separator") or ".",
        )
        super().__init__(f"translation missing: {'.'.join(self.keys)}")


class InvalidPluralizationData(I18nError, ValueError):
    """Raised when a pluralizable entry lacks the key selected for a count."""

    def __init__(self, entry: Any, count: Any):
        self.entry = entry
        self.count = count
        super().__init__(
            f"translation data {entry!r} can not be used with count={count}"
        )


class MissingInterpolationArgument(I18nError, KeyError):
    """Raised when a template names a placeholder with no supplied value."""

    def __init__(self, key: str, values: Mapping[str, Any], string: str):
        self.key = key
        self.values = dict(values)
        self.string = string
        super().__init__(
            f"missing interpolation argument {key!r} in {string!r} "
            f"({sorted(self.values)} given)"
        )


class ReservedInterpolationKey(I18nError, ValueError):
    """Raised when a template uses a reserved option name as a placeholder."""

    def __init__(self, key: str, string: str):
        self.key = key
        self.string = string
        super().__init__(f"reserved key {key!r} used in {string!r}")


class UnknownFileType(I18nError, ValueError):
    """Raised when a translation file has an unsupported extension."""

    def __init__(self, file_type: str, filename: str):
        self.file_type = file_type
        self.filename = filename
        super().__init__(
            f"can not load translations from {filename}, "
            f"the file type {file_type} is not known"
        )


class InvalidLocaleData(I18nError, ValueError):
    """Raised when a translation file can not be parsed into a mapping."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(
            f"can not load translations from {filename}: {reason}"
        )
