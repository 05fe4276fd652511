"""Holder for the application's current locale.

UI toolkits keep the active locale in their own state; ``LocaleContext`` is
the accessor the resolver reads when a lookup names no locale. Any
zero-argument callable returning a locale string (or None) can be used
instead.
"""

from typing import Callable, Optional

from localekit.i18n.exceptions import InvalidLocaleError
from localekit.i18n.locales import INVALID_LOCALE, normalize_locale

LocaleProvider = Callable[[], Optional[str]]


class LocaleContext:
    """Mutable current locale, readable as a ``LocaleProvider``.

    Usage:
        context = LocaleContext("pt_BR")
        resolver = Resolver(registry, locale_provider=context)
        context.set("es")
    """

    def __init__(self, locale: Optional[str] = None):
        self._locale: Optional[str] = None
        if locale is not None:
            self.set(locale)

    def get(self) -> Optional[str]:
        return self._locale

    def set(self, locale: str) -> None:
        """Change the current locale.

        Raises:
            InvalidLocaleError: If the locale is the string 'null'.
        """
        normalized = normalize_locale(locale)
        if normalized == INVALID_LOCALE:
            raise InvalidLocaleError(
                f"Locale is the 4 letter string '{INVALID_LOCALE}', which is invalid.",
                locale=locale,
            )
        self._locale = normalized or None

    def clear(self) -> None:
        self._locale = None

    def __call__(self) -> Optional[str]:
        return self._locale
