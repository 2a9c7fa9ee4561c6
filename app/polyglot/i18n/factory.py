"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators from the
application settings.
"""

from typing import Optional, Sequence

import structlog

from polyglot.configuration import I18nSettings, get_settings
from polyglot.i18n.backend import Backend
from polyglot.i18n.chain import ChainBackend
from polyglot.i18n.loader import expand_load_path
from polyglot.i18n.memoize import MemoizedInMemoryBackend
from polyglot.i18n.memory import InMemoryBackend
from polyglot.i18n.translator import Translator

logger = structlog.get_logger()


def create_backend(settings: Optional[I18nSettings] = None) -> InMemoryBackend:
    """Create the default storage backend described by the settings.

    Args:
        settings: Translation settings (default: application settings).

    Returns:
        MemoizedInMemoryBackend when memoization is enabled, otherwise
        InMemoryBackend, reading the configured load path lazily.
    """
    settings = settings or get_settings().i18n
    load_path = expand_load_path(settings.load_path)
    backend_class = MemoizedInMemoryBackend if settings.memoize else InMemoryBackend
    return backend_class(
        load_path=load_path,
        default_separator=settings.default_separator,
    )


def create_translator(
    settings: Optional[I18nSettings] = None,
    backends: Optional[Sequence[Backend]] = None,
    preload: bool = False,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        settings: Translation settings (default: application settings).
        backends: Backends to chain in front of the default backend; the
            first one receives writes.
        preload: Whether to load the configured files immediately instead of
            on first lookup.

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use defaults from the environment
        translator = create_translator()

        # Overrides from a custom store, falling back to files
        translator = create_translator(backends=[DatabaseBackend()])
    """
    settings = settings or get_settings().i18n
    default_backend = create_backend(settings)

    if backends:
        backend: Backend = ChainBackend(*backends, default_backend)
    else:
        backend = default_backend

    translator = Translator(
        backend=backend,
        default_locale=settings.default_locale,
        raise_on_missing=settings.raise_on_missing,
    )

    if preload:
        default_backend.init_translations()
        logger.info(
            "translator_created_with_preload",
            file_count=len(default_backend.load_path),
            locale_count=len(translator.available_locales()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            file_count=len(default_backend.load_path),
        )

    return translator
