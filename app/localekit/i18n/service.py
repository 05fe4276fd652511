"""Translation service bound to one store.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, Dict, Optional, Sequence

from localekit.i18n.context import LocaleContext
from localekit.i18n.diagnostics import DiagnosticsRegistry
from localekit.i18n.resolver import Resolver, fill
from localekit.i18n.store import BaseTranslations


class TranslationService:
    """Class-based translation service.

    Binds a translation store, a resolver and the current locale together.
    This is a thin facade: all lookups are delegated to the ``Resolver``.

    Usage:
        service = create_service(translations, locale="pt_br")
        service.translate("Hello")            # current locale
        service.translate("Hello", "es")      # explicit locale
        service.plural(3, "%d apples")
    """

    def __init__(
        self,
        translations: BaseTranslations,
        resolver: Optional[Resolver] = None,
        locale_context: Optional[LocaleContext] = None,
    ):
        """Initialize translation service.

        Args:
            translations: Store used for every lookup.
            resolver: Optional pre-configured Resolver. If not provided, one
                reading ``locale_context`` is created. A resolver without a
                locale provider is given ``locale_context``.
            locale_context: Optional current locale holder. Defaults to the
                resolver's provider when that is a ``LocaleContext``.
        """
        if locale_context is None and resolver is not None:
            if isinstance(resolver.locale_provider, LocaleContext):
                locale_context = resolver.locale_provider

        self.translations = translations
        self.locale_context = locale_context or LocaleContext()

        if resolver is None:
            resolver = Resolver(locale_provider=self.locale_context)
        elif resolver.locale_provider is None:
            resolver.locale_provider = self.locale_context
        self._resolver = resolver

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    @property
    def registry(self) -> DiagnosticsRegistry:
        return self._resolver.registry

    @property
    def locale(self) -> Optional[str]:
        """Locale used when a lookup names none."""
        return self._resolver.effective_locale(self.translations)

    def set_locale(self, locale: str) -> None:
        self.locale_context.set(locale)

    def translate(self, key: str, locale: Optional[str] = None) -> str:
        return self._resolver.resolve(key, self.translations, locale)

    def plural(self, n: int, key: str, locale: Optional[str] = None) -> str:
        return self._resolver.resolve_plural(n, key, self.translations, locale)

    def version(self, modifier: Any, key: str, locale: Optional[str] = None) -> str:
        return self._resolver.resolve_version(modifier, key, self.translations, locale)

    def all_versions(
        self, key: str, locale: Optional[str] = None
    ) -> Dict[Optional[str], str]:
        return self._resolver.resolve_all_versions(key, self.translations, locale)

    def fill(self, key: str, params: Sequence[Any], locale: Optional[str] = None) -> str:
        """Translate a key, then substitute its printf-style placeholders."""
        return fill(self.translate(key, locale), params)
