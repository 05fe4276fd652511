"""Shared fixtures for localekit tests."""

import pytest

from localekit.i18n import DiagnosticsRegistry


class CallbackRecorder:
    """Collects (key, locale) pairs passed to a diagnostics callback."""

    def __init__(self):
        self.calls = []

    def __call__(self, key, locale):
        self.calls.append((key, locale))


@pytest.fixture
def missing_key_calls():
    return CallbackRecorder()


@pytest.fixture
def missing_translation_calls():
    return CallbackRecorder()


@pytest.fixture
def registry(missing_key_calls, missing_translation_calls):
    """Fresh DiagnosticsRegistry whose callbacks record their calls."""
    registry = DiagnosticsRegistry(
        missing_key_callback=missing_key_calls,
        missing_translation_callback=missing_translation_calls,
    )
    yield registry
    registry.clear()
