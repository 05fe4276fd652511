"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_apples_text,
    make_by_locale_translations,
    make_translations,
)

__all__ = [
    "make_apples_text",
    "make_by_locale_translations",
    "make_translations",
]
