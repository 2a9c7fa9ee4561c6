"""i18n engine - translation resolution with fallbacks, pluralization and caching.

Resolves a (locale, key, options) request into localized content, applying
default chains, symbolic references, pluralization and interpolation, and
composes several backends with fallback and namespace merging.

Main components:
- models: TranslationRequest and the subject variants (SymbolicRef, Computed, Literal)
- result: Found / Missing resolution outcomes
- backend: Backend base class implementing the resolution engine
- memory: InMemoryBackend storing nested translations
- memoize: Memoize mixin caching raw lookups per locale
- chain: ChainBackend composing several backends
- loader: YAML and Python translation file loading
- translator: Translator service raising or soft-failing on missing content
"""

from polyglot.i18n.backend import Backend
from polyglot.i18n.cache import LookupCache
from polyglot.i18n.chain import ChainBackend
from polyglot.i18n.errors import (
    I18nError,
    InvalidLocale,
    InvalidLocaleData,
    InvalidPluralizationData,
    MissingInterpolationArgument,
    MissingTranslation,
    ReservedInterpolationKey,
    UnknownFileType,
)
from polyglot.i18n.factory import create_backend, create_translator
from polyglot.i18n.interpolation import get_interpolation_keys, interpolate
from polyglot.i18n.keys import normalize_flat_keys, normalize_keys
from polyglot.i18n.memoize import Memoize, MemoizedInMemoryBackend
from polyglot.i18n.memory import InMemoryBackend
from polyglot.i18n.models import (
    Computed,
    Literal,
    SymbolicRef,
    TranslationRequest,
    ref,
    to_subject,
)
from polyglot.i18n.result import Found, Missing, Resolution
from polyglot.i18n.translator import Translator

__all__ = [
    "Backend",
    "ChainBackend",
    "InMemoryBackend",
    "Memoize",
    "MemoizedInMemoryBackend",
    "LookupCache",
    "Translator",
    "create_backend",
    "create_translator",
    "TranslationRequest",
    "SymbolicRef",
    "Computed",
    "Literal",
    "ref",
    "to_subject",
    "Found",
    "Missing",
    "Resolution",
    "normalize_keys",
    "normalize_flat_keys",
    "interpolate",
    "get_interpolation_keys",
    "I18nError",
    "InvalidLocale",
    "MissingTranslation",
    "InvalidPluralizationData",
    "MissingInterpolationArgument",
    "ReservedInterpolationKey",
    "UnknownFileType",
    "InvalidLocaleData",
]
