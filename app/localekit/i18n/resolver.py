"""Resolve translation keys to localized texts.

Fallback order for ``Resolver.resolve()``:

1. The exact locale ("pt_br" asked, "pt_br" available).
2. The general language of the locale ("pt_br" asked, only "pt" available).
3. Any locale with that language ("pt_mo" asked, only "pt_br" available).
   Locales are tried in the order they were added for the key.
4. The key itself, which is the text in the default locale.
"""

from typing import Any, Dict, Optional, Sequence

from localekit.i18n.context import LocaleProvider
from localekit.i18n.diagnostics import DiagnosticsRegistry
from localekit.i18n.exceptions import (
    InvalidLocaleError,
    MalformedVersionSegmentError,
    NoMatchingVariantError,
)
from localekit.i18n.locales import (
    INVALID_LOCALE,
    is_general,
    language_of,
    normalize_locale,
)
from localekit.i18n.store import BaseTranslations
from localekit.i18n.versions import decode_all, decode_variant, select_plural_variant
from localekit.logging import get_module_logger

logger = get_module_logger()


def fill(text: str, params: Sequence[Any]) -> str:
    """Substitute printf-style placeholders (``%s``, ``%d``...) with params."""
    return text % tuple(params)


class Resolver:
    """Looks up keys in translation stores.

    Attributes:
        registry: Where missing keys and translations are reported.
        locale_provider: Returns the current locale when a lookup names none.
    """

    def __init__(
        self,
        registry: Optional[DiagnosticsRegistry] = None,
        locale_provider: Optional[LocaleProvider] = None,
    ):
        self.registry = registry or DiagnosticsRegistry()
        self.locale_provider = locale_provider

    def effective_locale(
        self, translations: BaseTranslations, locale: Optional[str] = None
    ) -> Optional[str]:
        """Return the locale a lookup will use.

        The given locale if any, otherwise the provider's current locale,
        otherwise the default locale of the translations. All are normalized
        to lowercase.
        """
        if locale:
            return normalize_locale(locale)
        current = self.locale_provider() if self.locale_provider else None
        if current:
            return normalize_locale(current)
        return translations.default_locale or None

    def resolve(
        self, key: str, translations: BaseTranslations, locale: Optional[str] = None
    ) -> str:
        """Return the text of a key in a locale, falling back as described above.

        Args:
            key: Translation key.
            translations: Store to search.
            locale: Requested locale; the current locale is used when omitted.

        Returns:
            The best matching text, or the key itself.

        Raises:
            InvalidLocaleError: If the effective locale is the string 'null'.
        """
        texts = translations.get(key)

        if texts is None:
            self.registry.record_missing_key(key, translations.default_locale)
            return key

        locale = self.effective_locale(translations, locale)

        if locale == INVALID_LOCALE:
            logger.error("invalid_locale", key=key, locale=locale)
            raise InvalidLocaleError(
                f"Locale is the 4 letter string '{INVALID_LOCALE}', which is invalid.",
                key=key,
                locale=locale,
            )

        # During initialization there may be no locale yet.
        if locale is None:
            return key

        text = texts.get(locale)
        if text is not None:
            return text

        if (
            self.registry.record_missing_translations
            and locale != translations.default_locale
        ):
            self.registry.record_missing_translation(key, locale)

        language = language_of(locale)

        # A general locale was already searched above.
        if not is_general(locale):
            text = texts.get(language)
            if text is not None:
                return text

        for other_locale, other_text in texts.items():
            if language_of(other_locale) == language:
                return other_text

        return key

    def resolve_all_versions(
        self, key: str, translations: BaseTranslations, locale: Optional[str] = None
    ) -> Dict[Optional[str], str]:
        """Return every version of a translated text, indexed by modifier.

        The unversioned text is indexed by ``None``.

        Raises:
            MalformedVersionSegmentError: If the stored text is not a valid
                versioned text.
        """
        text = self.resolve(key, translations, locale)
        try:
            return decode_all(text)
        except MalformedVersionSegmentError as exc:
            effective = self.effective_locale(translations, locale)
            logger.error("malformed_versioned_text", key=key, locale=effective)
            raise MalformedVersionSegmentError(
                f"{exc.message} (key: '{key}', locale: '{effective}')",
                key=key,
                locale=effective,
            ) from exc

    def resolve_plural(
        self,
        n: int,
        key: str,
        translations: BaseTranslations,
        locale: Optional[str] = None,
    ) -> str:
        """Return the plural version of a text for n items.

        Every ``%d`` in the chosen version is replaced with n.

        Raises:
            NoMatchingVariantError: If neither a matching version nor the
                unversioned text exists.
        """
        versions = self.resolve_all_versions(key, translations, locale)
        try:
            return select_plural_variant(n, versions)
        except NoMatchingVariantError as exc:
            effective = self.effective_locale(translations, locale)
            raise NoMatchingVariantError(
                f"No version found (modifier: {n}, key: '{key}', locale: '{effective}').",
                key=key,
                locale=effective,
                modifier=n,
            ) from exc

    def resolve_version(
        self,
        modifier: Any,
        key: str,
        translations: BaseTranslations,
        locale: Optional[str] = None,
    ) -> str:
        """Return the version of a text for a modifier.

        Any object may be used as modifier; it is compared through ``str()``.

        Raises:
            NoMatchingVariantError: If the text has no version for the modifier.
        """
        text = self.resolve(key, translations, locale)
        try:
            return decode_variant(text, modifier)
        except NoMatchingVariantError as exc:
            effective = self.effective_locale(translations, locale)
            raise NoMatchingVariantError(
                f"This text has no version for modifier '{modifier}' "
                f"(modifier: {modifier}, key: '{key}', locale: '{effective}').",
                key=key,
                locale=effective,
                modifier=modifier,
            ) from exc

    def record_missing_key(self, key: str) -> str:
        """Record a key as missing, with unknown locale, and return it."""
        self.registry.record_missing_key(key, "")
        return key
