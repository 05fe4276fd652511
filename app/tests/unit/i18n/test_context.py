"""Tests for localekit.i18n.context module."""

import pytest

from localekit.i18n import InvalidLocaleError, LocaleContext


@pytest.mark.unit
class TestLocaleContext:
    """Tests for LocaleContext."""

    def test_starts_empty(self):
        context = LocaleContext()
        assert context.get() is None
        assert context() is None

    def test_initial_locale_is_normalized(self):
        context = LocaleContext("pt_BR")
        assert context.get() == "pt_br"

    def test_set_and_clear(self):
        context = LocaleContext()
        context.set("es_AR")
        assert context() == "es_ar"

        context.clear()
        assert context() is None

    def test_blank_locale_clears(self):
        context = LocaleContext("es")
        context.set("  ")
        assert context.get() is None

    @pytest.mark.parametrize("locale", ["null", "Null"])
    def test_null_locale_is_rejected(self, locale):
        context = LocaleContext("es")
        with pytest.raises(InvalidLocaleError):
            context.set(locale)
        assert context.get() == "es"
