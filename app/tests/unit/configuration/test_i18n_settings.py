"""Unit tests for localekit.configuration settings."""

import pytest
from pydantic import ValidationError

from localekit.configuration import I18nSettings, Settings


@pytest.mark.unit
class TestI18nSettings:
    """Test I18nSettings configuration."""

    def test_default_values(self, monkeypatch):
        """Test I18nSettings with default values."""
        for name in (
            "I18N_DEFAULT_LOCALE",
            "I18N_RECORD_MISSING_KEYS",
            "I18N_RECORD_MISSING_TRANSLATIONS",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = I18nSettings()

        assert settings.DEFAULT_LOCALE == "en_us"
        assert settings.RECORD_MISSING_KEYS is True
        assert settings.RECORD_MISSING_TRANSLATIONS is True

    def test_environment_overrides(self, monkeypatch):
        """Test I18nSettings read from environment variables."""
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "pt_BR_")
        monkeypatch.setenv("I18N_RECORD_MISSING_KEYS", "false")
        monkeypatch.setenv("I18N_RECORD_MISSING_TRANSLATIONS", "0")

        settings = I18nSettings()

        assert settings.DEFAULT_LOCALE == "pt_br"
        assert settings.RECORD_MISSING_KEYS is False
        assert settings.RECORD_MISSING_TRANSLATIONS is False

    def test_empty_default_locale_is_rejected(self, monkeypatch):
        """Test an empty default locale fails validation."""
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", " _ ")

        with pytest.raises(ValidationError):
            I18nSettings()


@pytest.mark.unit
class TestSettings:
    """Test the Settings aggregator."""

    def test_subsettings_instantiated(self):
        """Test Settings builds its i18n section automatically."""
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)

    def test_subsettings_override(self):
        """Test a settings section can be passed explicitly."""
        i18n = I18nSettings()
        settings = Settings(i18n=i18n)
        assert settings.i18n is i18n

    def test_is_production_without_prefix(self, monkeypatch):
        """Test production mode is detected when PREFIX is empty."""
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        """Test development mode is detected when PREFIX is set."""
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
