"""Bookkeeping of missing keys and missing translations.

A ``DiagnosticsRegistry`` is built once by the application (see
``localekit.i18n.factory``) and shared by every resolver that should report
into it. Tests typically build their own registry, or call ``clear()``
between cases.
"""

from typing import Callable, Optional, Set

from localekit.configuration import I18nSettings
from localekit.i18n.models import TranslatedEntry
from localekit.logging import get_module_logger

logger = get_module_logger()

# (key, locale) -> None
MissingCallback = Callable[[str, str], None]


def log_missing_key(key: str, locale: str) -> None:
    """Default callback for keys absent from a store."""
    logger.warning("missing_translation_key", key=key, locale=locale)


def log_missing_translation(key: str, locale: str) -> None:
    """Default callback for keys with no text in the requested locale."""
    logger.warning("missing_translation", key=key, locale=locale)


class DiagnosticsRegistry:
    """Collects the keys and translations that lookups could not find.

    Sets only grow; nothing is pruned until ``clear()`` is called. No locking
    is done: share a registry across threads only with external
    synchronization.

    Attributes:
        missing_keys: Keys absent from a store, as (locale, key) entries.
        missing_translations: Keys with no text in the requested locale, as
            (locale, key) entries.
        record_missing_keys: Whether missing keys are added to the set.
        record_missing_translations: Whether missing translations are added
            to the set (and their callback fired).
        missing_key_callback: Called with (key, locale) on every missing key.
        missing_translation_callback: Called with (key, locale) on every
            recorded missing translation.
    """

    def __init__(
        self,
        record_missing_keys: bool = True,
        record_missing_translations: bool = True,
        missing_key_callback: Optional[MissingCallback] = None,
        missing_translation_callback: Optional[MissingCallback] = None,
    ):
        self.missing_keys: Set[TranslatedEntry] = set()
        self.missing_translations: Set[TranslatedEntry] = set()
        self.record_missing_keys = record_missing_keys
        self.record_missing_translations = record_missing_translations
        self.missing_key_callback: MissingCallback = missing_key_callback or log_missing_key
        self.missing_translation_callback: MissingCallback = (
            missing_translation_callback or log_missing_translation
        )

    @classmethod
    def from_settings(cls, settings: I18nSettings) -> "DiagnosticsRegistry":
        return cls(
            record_missing_keys=settings.RECORD_MISSING_KEYS,
            record_missing_translations=settings.RECORD_MISSING_TRANSLATIONS,
        )

    def record_missing_key(self, key: str, locale: str) -> None:
        """Record a key absent from a store and fire the missing key callback.

        The callback fires even when recording is disabled.
        """
        if self.record_missing_keys:
            self.missing_keys.add(TranslatedEntry(locale=locale, text=key))
        self.missing_key_callback(key, locale)

    def record_missing_translation(self, key: str, locale: str) -> None:
        """Record a key with no text in a locale and fire its callback.

        Callers check ``record_missing_translations`` first.
        """
        self.missing_translations.add(TranslatedEntry(locale=locale, text=key))
        self.missing_translation_callback(key, locale)

    def clear(self) -> None:
        """Forget everything recorded so far."""
        self.missing_keys.clear()
        self.missing_translations.clear()

    def reset_callbacks(self) -> None:
        self.missing_key_callback = log_missing_key
        self.missing_translation_callback = log_missing_translation
