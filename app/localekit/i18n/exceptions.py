"""Exceptions for the i18n system.

Unresolved keys and translations are not errors: lookups degrade to
returning the key and a diagnostic is recorded. The exceptions below signal
structurally invalid input or programmer misuse.
"""

from typing import Any, Optional


class TranslationsError(Exception):
    """Base exception for all translation errors.

    Attributes:
        message: human-friendly message
        key: translation key involved, if any
        locale: locale involved, if any
        modifier: plural/version modifier involved, if any

    Example:
        try:
            resolver.resolve_plural(3, "apples", translations)
        except TranslationsError as e:
            logger.error("translation_error", error=str(e))
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        locale: Optional[str] = None,
        modifier: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.key = key
        self.locale = locale
        self.modifier = modifier


class InvalidLocaleError(TranslationsError):
    """Raised when the effective locale is the 4 letter string 'null'.

    Example:
        >>> resolver.resolve("Hello", translations, locale="null")
        Traceback (most recent call last):
        ...
        InvalidLocaleError: Locale is the 4 letter string 'null', which is invalid.
    """


class MissingDefaultTranslationError(TranslationsError):
    """Raised when a bulk-insert entry has no text for the default locale."""


class MalformedVersionSegmentError(TranslationsError):
    """Raised when a versioned text segment is not exactly one label and one text."""


class NoMatchingVariantError(TranslationsError):
    """Raised when plural or version selection finds no text for a modifier.

    Example:
        >>> resolver.resolve_version("f", "Hello", translations)
        Traceback (most recent call last):
        ...
        NoMatchingVariantError: This text has no version for modifier 'f' ...
    """


class IncompatibleMergeError(TranslationsError):
    """Raised when merging stores with different default locales."""


class InvalidFieldValueError(TranslationsError):
    """Raised when an empty locale, key or text is supplied."""
