"""Locale string helpers.

Locales are lowercase strings: a 2 letter language (``"pt"``) optionally
followed by an underscore and a region (``"pt_br"``).
"""

SEPARATOR = "_"

INVALID_LOCALE = "null"


def is_general(locale: str) -> bool:
    """Return True if the locale is just a language, with no region.

    "pt" is a general locale, while "pt_br" is not.
    """
    return len(locale) == 2 and SEPARATOR not in locale


def language_of(locale: str) -> str:
    """Return the language of a locale, which must be its first 2 chars."""
    return locale[:2]


def shares_language(locale: str, other: str) -> bool:
    return language_of(locale) == language_of(other)


def normalize_locale(locale: str) -> str:
    """Strip, lowercase and remove trailing underscores.

    Example:
        >>> normalize_locale(" pt_BR_ ")
        'pt_br'
    """
    return locale.strip().lower().rstrip(SEPARATOR)
