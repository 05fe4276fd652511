"""In-memory translation stores.

``Translations`` is indexed by key: each key maps to its texts per locale.
``TranslationsByLocale`` is a locale-indexed view over the same table, for
callers that organize their translations one locale at a time.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Mapping, Optional

from localekit.i18n.exceptions import (
    IncompatibleMergeError,
    InvalidFieldValueError,
    MissingDefaultTranslationError,
)
from localekit.i18n.locales import language_of, normalize_locale
from localekit.i18n.models import TranslatedEntry, TranslationTable
from localekit.i18n.versions import base_text, prettify
from localekit.logging import get_module_logger

logger = get_module_logger()


class BaseTranslations(ABC):
    """Read interface shared by the key-indexed and locale-indexed stores.

    The resolver only needs ``default_locale`` and ``get(key)``.
    """

    @property
    @abstractmethod
    def table(self) -> TranslationTable:
        """Underlying key -> locale -> text table."""

    @property
    @abstractmethod
    def default_locale(self) -> str:
        """Locale in which the keys themselves are written."""

    @property
    def default_language(self) -> str:
        return language_of(self.default_locale)

    def get(self, key: str) -> Optional[Dict[str, str]]:
        """Return the texts per locale for a key, or None if the key is unknown."""
        return self.table.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.table

    def __len__(self) -> int:
        return len(self.table)

    def locales(self) -> List[str]:
        """Return every locale with at least one text, in insertion order."""
        seen: Dict[str, None] = {}
        for texts in self.table.values():
            for locale in texts:
                seen.setdefault(locale, None)
        return list(seen)

    def entries(self, key: str) -> List[TranslatedEntry]:
        """Return the texts of a key sorted for display.

        Default locale first, then the default language, then the others.
        """
        texts = self.get(key) or {}
        return sorted(
            (TranslatedEntry(locale=locale, text=text) for locale, text in texts.items()),
            key=TranslatedEntry.sort_key(self.default_locale),
        )

    def __str__(self) -> str:
        lines = ["", "Translations: ---------------"]
        for key in self.table:
            for entry in self.entries(key):
                lines.append(f"  {entry.locale.ljust(5)} | {prettify(entry.text)}")
            lines.append("-----------------------------")
        return "\n".join(lines) + "\n"


class Translations(BaseTranslations):
    """Key-indexed translation store.

    Keys are the texts in the default locale. Each key maps to its texts per
    locale; a locale appears at most once per key.

    Attributes:
        default_locale: Normalized default locale (e.g. "en_us").

    Usage:
        translations = Translations("en_us")
        translations.add(locale="pt_br", key="Hello", text="Olá")
        translations.union_from_base_locale_map({"en_us": "Bye", "pt_br": "Tchau"})
    """

    def __init__(self, default_locale: str):
        normalized = normalize_locale(default_locale or "")
        if not normalized:
            raise InvalidFieldValueError("Missing default locale.")
        self._default_locale = normalized
        self._table: TranslationTable = {}

    @property
    def table(self) -> TranslationTable:
        return self._table

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def __getitem__(self, key: str) -> Dict[str, str]:
        return self._table[key]

    def add(self, locale: str, key: str, text: str) -> None:
        """Insert or overwrite the text of a key in a locale.

        Args:
            locale: Locale of the text; normalized before storing.
            key: Translation key.
            text: Translated text (may be versioned).

        Raises:
            InvalidFieldValueError: If locale, key or text is empty. The
                store is left unchanged.
        """
        locale = normalize_locale(locale or "")
        if not locale:
            raise InvalidFieldValueError("Missing locale.", key=key)
        if not key:
            raise InvalidFieldValueError("Missing key.", locale=locale)
        if not text:
            raise InvalidFieldValueError("Missing translated text.", key=key, locale=locale)

        self._table.setdefault(key, {})[locale] = text

    def merge(self, other: BaseTranslations) -> "Translations":
        """Add every text of another store to this one.

        Texts already present for the same key and locale are overwritten.

        Raises:
            IncompatibleMergeError: If the stores have different default locales.
        """
        _check_compatible(self, other)
        for key, texts in other.table.items():
            for locale, text in texts.items():
                self.add(locale=locale, key=key, text=text)
        logger.debug(
            "merged_translations",
            default_locale=self.default_locale,
            key_count=len(self),
        )
        return self

    def union_from_base_locale_map(self, translations: Mapping[str, str]) -> "Translations":
        """Add one entry given as texts per locale.

        The text in the default locale, stripped of any version encoding,
        becomes the key. The given texts replace any previous texts of that key.

        Args:
            translations: Mapping of locale -> text for a single entry.

        Raises:
            MissingDefaultTranslationError: If there is no text for the
                default locale.
            InvalidFieldValueError: If any locale or text is empty.
        """
        texts: Dict[str, str] = {}
        for locale, text in translations.items():
            normalized = normalize_locale(locale or "")
            if not normalized:
                raise InvalidFieldValueError("Missing locale.")
            if not text:
                raise InvalidFieldValueError("Missing translated text.", locale=normalized)
            texts[normalized] = text

        default_text = texts.get(self.default_locale)
        if default_text is None:
            logger.error(
                "missing_default_translation",
                default_locale=self.default_locale,
                locales=list(texts),
            )
            raise MissingDefaultTranslationError(
                f"No default translation for '{self.default_locale}'.",
                locale=self.default_locale,
            )

        key = base_text(default_text)
        if not key:
            raise InvalidFieldValueError("Missing key.", locale=self.default_locale)

        self._table[key] = texts
        return self

    def extend(self, entries: Iterable[Mapping[str, str]]) -> "Translations":
        """Call ``union_from_base_locale_map()`` for each entry."""
        for entry in entries:
            self.union_from_base_locale_map(entry)
        return self

    def by_locale(self) -> "TranslationsByLocale":
        """Return a locale-indexed view sharing this store."""
        return TranslationsByLocale(self)


class TranslationsByLocale(BaseTranslations):
    """Locale-indexed view over a ``Translations`` store.

    Both objects share one table: texts added through either are visible
    through the other.

    Usage:
        translations = TranslationsByLocale.create("en_us")
        translations.union({
            "en_us": {"Hello": "Hello", "Bye": "Bye"},
            "pt_br": {"Hello": "Olá", "Bye": "Tchau"},
        })
        translations["pt_br"]  # {"Hello": "Olá", "Bye": "Tchau"}
    """

    def __init__(self, by_key: Translations):
        self.by_key = by_key

    @classmethod
    def create(cls, default_locale: str) -> "TranslationsByLocale":
        return cls(Translations(default_locale))

    @property
    def table(self) -> TranslationTable:
        return self.by_key.table

    @property
    def default_locale(self) -> str:
        return self.by_key.default_locale

    def for_locale(self, locale: str) -> Dict[str, str]:
        """Return key -> text for every key translated to a locale."""
        locale = normalize_locale(locale)
        return {
            key: texts[locale] for key, texts in self.table.items() if locale in texts
        }

    def __getitem__(self, locale: str) -> Dict[str, str]:
        return self.for_locale(locale)

    def union(self, translations: Mapping[str, Mapping[str, str]]) -> "TranslationsByLocale":
        """Add texts given as locale -> {key -> text}.

        Keys written as versioned texts are reduced to their base text.

        Raises:
            InvalidFieldValueError: If any locale, key or text is empty.
        """
        for locale, texts in translations.items():
            for key, text in texts.items():
                self.by_key.add(locale=locale, key=base_text(key), text=text)
        return self

    def merge(self, other: BaseTranslations) -> "TranslationsByLocale":
        """Add every text of another store to this one.

        Raises:
            IncompatibleMergeError: If the stores have different default locales.
        """
        self.by_key.merge(other)
        return self


def _check_compatible(store: BaseTranslations, other: BaseTranslations) -> None:
    if other.default_locale != store.default_locale:
        logger.error(
            "incompatible_translations_merge",
            default_locale=store.default_locale,
            other_default_locale=other.default_locale,
        )
        raise IncompatibleMergeError(
            "Can't combine translations with different default locales: "
            f"'{store.default_locale}' and '{other.default_locale}'.",
            locale=other.default_locale,
        )
