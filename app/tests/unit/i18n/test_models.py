"""Tests for localekit.i18n.models module."""

import pytest

from localekit.i18n.models import TranslatedEntry


@pytest.mark.unit
class TestTranslatedEntry:
    """Tests for TranslatedEntry."""

    def test_entries_are_hashable_and_compare_by_value(self):
        entries = {
            TranslatedEntry(locale="en_us", text="Hello"),
            TranslatedEntry(locale="en_us", text="Hello"),
        }
        assert entries == {TranslatedEntry(locale="en_us", text="Hello")}

    def test_entries_are_frozen(self):
        entry = TranslatedEntry(locale="en_us", text="Hello")
        with pytest.raises(AttributeError):
            entry.text = "Bye"  # type: ignore[misc]

    def test_sort_key_orders_default_then_language_then_alphabetical(self):
        entries = [
            TranslatedEntry(locale="pt_br", text="Olá"),
            TranslatedEntry(locale="en_gb", text="Hello"),
            TranslatedEntry(locale="de", text="Hallo"),
            TranslatedEntry(locale="en", text="Hello"),
            TranslatedEntry(locale="en_us", text="Hello"),
        ]

        ordered = sorted(entries, key=TranslatedEntry.sort_key("en_us"))

        assert [entry.locale for entry in ordered] == [
            "en_us",
            "en",
            "en_gb",
            "de",
            "pt_br",
        ]
