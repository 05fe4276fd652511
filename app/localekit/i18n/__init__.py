"""i18n system - translation lookup with locale fallback.

Main components:
- locales: locale helpers (general locale, language of a locale)
- versions: plural and custom versions packed in one text
- store: Translations and TranslationsByLocale stores
- resolver: Resolver with the locale fallback algorithm
- diagnostics: DiagnosticsRegistry of missing keys and translations
- service/factory: TranslationService and its composition root
"""

from localekit.i18n.context import LocaleContext, LocaleProvider
from localekit.i18n.diagnostics import DiagnosticsRegistry
from localekit.i18n.exceptions import (
    IncompatibleMergeError,
    InvalidFieldValueError,
    InvalidLocaleError,
    MalformedVersionSegmentError,
    MissingDefaultTranslationError,
    NoMatchingVariantError,
    TranslationsError,
)
from localekit.i18n.factory import create_resolver, create_service, create_translations
from localekit.i18n.locales import is_general, language_of, normalize_locale
from localekit.i18n.models import TranslatedEntry
from localekit.i18n.resolver import Resolver, fill
from localekit.i18n.service import TranslationService
from localekit.i18n.store import BaseTranslations, Translations, TranslationsByLocale
from localekit.i18n.versions import (
    VersionedText,
    decode_all,
    decode_variant,
    is_versioned,
    modifier,
    select_plural_variant,
    versioned,
)

__all__ = [
    "BaseTranslations",
    "DiagnosticsRegistry",
    "IncompatibleMergeError",
    "InvalidFieldValueError",
    "InvalidLocaleError",
    "LocaleContext",
    "LocaleProvider",
    "MalformedVersionSegmentError",
    "MissingDefaultTranslationError",
    "NoMatchingVariantError",
    "Resolver",
    "TranslatedEntry",
    "TranslationService",
    "Translations",
    "TranslationsByLocale",
    "TranslationsError",
    "VersionedText",
    "create_resolver",
    "create_service",
    "create_translations",
    "decode_all",
    "decode_variant",
    "fill",
    "is_general",
    "is_versioned",
    "language_of",
    "modifier",
    "normalize_locale",
    "select_plural_variant",
    "versioned",
]
