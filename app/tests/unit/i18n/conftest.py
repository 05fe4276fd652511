"""Feature-level fixtures for i18n tests."""

import pytest

from localekit.i18n import LocaleContext, Resolver
from tests.factories.i18n import make_translations


@pytest.fixture
def translations():
    """Key-indexed store with en_us default and pt_br, pt, es, fr_ca texts."""
    return make_translations()


@pytest.fixture
def locale_context():
    return LocaleContext()


@pytest.fixture
def resolver(registry, locale_context):
    """Resolver reporting into the test registry and reading locale_context."""
    return Resolver(registry=registry, locale_provider=locale_context)
