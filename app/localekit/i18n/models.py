"""Data structures for translated strings."""

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from localekit.i18n.locales import language_of

# key -> locale -> translated text
TranslationTable = Dict[str, Dict[str, str]]


@dataclass(frozen=True)
class TranslatedEntry:
    """A text in a given locale.

    Frozen to be hashable, so entries can be collected in sets (see
    DiagnosticsRegistry).

    Attributes:
        locale: Locale of the text (may be empty when unknown).
        text: Translated text, or the key when recording a miss.
    """

    locale: str
    text: str

    @staticmethod
    def sort_key(default_locale: str) -> Callable[["TranslatedEntry"], Tuple[int, str]]:
        """Build a sort key for displaying entries.

        Entries in the default locale come first, then entries with the same
        language as the default locale, then all others. Within each group
        entries are ordered alphabetically by locale.

        Args:
            default_locale: Default locale of the translations being listed.

        Returns:
            Function usable as ``key=`` in ``sorted()``.
        """
        default_language = language_of(default_locale)

        def _key(entry: "TranslatedEntry") -> Tuple[int, str]:
            if entry.locale == default_locale:
                group = 0
            elif entry.locale.startswith(default_language):
                group = 1
            else:
                group = 2
            return group, entry.locale

        return _key
