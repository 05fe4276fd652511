"""Tests for localekit.i18n.diagnostics module."""

import pytest

from localekit.configuration import I18nSettings
from localekit.i18n.diagnostics import (
    DiagnosticsRegistry,
    log_missing_key,
    log_missing_translation,
)
from localekit.i18n.models import TranslatedEntry


@pytest.mark.unit
class TestDiagnosticsRegistry:
    """Tests for DiagnosticsRegistry."""

    def test_defaults(self):
        registry = DiagnosticsRegistry()
        assert registry.missing_keys == set()
        assert registry.missing_translations == set()
        assert registry.record_missing_keys is True
        assert registry.record_missing_translations is True
        assert registry.missing_key_callback is log_missing_key
        assert registry.missing_translation_callback is log_missing_translation

    def test_default_callbacks_do_not_raise(self):
        registry = DiagnosticsRegistry()
        registry.record_missing_key("Hello", "en_us")
        registry.record_missing_translation("Hello", "pt_br")

    def test_record_missing_key(self, registry, missing_key_calls):
        registry.record_missing_key("Hello", "en_us")
        registry.record_missing_key("Hello", "en_us")

        assert registry.missing_keys == {TranslatedEntry(locale="en_us", text="Hello")}
        assert missing_key_calls.calls == [("Hello", "en_us"), ("Hello", "en_us")]

    def test_record_missing_key_disabled_still_fires_callback(
        self, registry, missing_key_calls
    ):
        registry.record_missing_keys = False
        registry.record_missing_key("Hello", "en_us")

        assert registry.missing_keys == set()
        assert missing_key_calls.calls == [("Hello", "en_us")]

    def test_record_missing_translation(self, registry, missing_translation_calls):
        registry.record_missing_translation("Hello", "pt_br")

        assert registry.missing_translations == {TranslatedEntry(locale="pt_br", text="Hello")}
        assert missing_translation_calls.calls == [("Hello", "pt_br")]

    def test_clear(self, registry):
        registry.record_missing_key("Hello", "en_us")
        registry.record_missing_translation("Hello", "pt_br")

        registry.clear()

        assert registry.missing_keys == set()
        assert registry.missing_translations == set()

    def test_reset_callbacks(self, registry):
        registry.reset_callbacks()
        assert registry.missing_key_callback is log_missing_key
        assert registry.missing_translation_callback is log_missing_translation

    def test_registries_are_independent(self):
        first = DiagnosticsRegistry()
        second = DiagnosticsRegistry()

        first.record_missing_key("Hello", "en_us")

        assert second.missing_keys == set()

    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("I18N_RECORD_MISSING_TRANSLATIONS", "false")

        registry = DiagnosticsRegistry.from_settings(I18nSettings())

        assert registry.record_missing_keys is True
        assert registry.record_missing_translations is False
