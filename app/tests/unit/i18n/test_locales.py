"""Tests for localekit.i18n.locales module."""

import pytest

from localekit.i18n.locales import (
    is_general,
    language_of,
    normalize_locale,
    shares_language,
)


@pytest.mark.unit
class TestIsGeneral:
    """Tests for is_general()."""

    @pytest.mark.parametrize("locale", ["pt", "en", "zh"])
    def test_language_only_is_general(self, locale):
        assert is_general(locale) is True

    @pytest.mark.parametrize("locale", ["pt_br", "en_us", "p_", "por", ""])
    def test_other_locales_are_not_general(self, locale):
        assert is_general(locale) is False


@pytest.mark.unit
class TestLanguageOf:
    """Tests for language_of() and shares_language()."""

    def test_language_is_first_two_chars(self):
        assert language_of("pt_br") == "pt"
        assert language_of("pt") == "pt"

    def test_shares_language(self):
        assert shares_language("pt_br", "pt_mo")
        assert shares_language("pt", "pt_br")
        assert not shares_language("pt_br", "es_ar")


@pytest.mark.unit
class TestNormalizeLocale:
    """Tests for normalize_locale()."""

    def test_lowercases(self):
        assert normalize_locale("pt_BR") == "pt_br"

    def test_trims_whitespace_and_trailing_underscores(self):
        assert normalize_locale("  en__ ") == "en"

    def test_keeps_canonical_locale(self):
        assert normalize_locale("es_ar") == "es_ar"
