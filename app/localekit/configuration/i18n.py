"""Translation lookup settings."""

from pydantic import Field, field_validator

from localekit.configuration.base import LibrarySettings


class I18nSettings(LibrarySettings):
    """Translation lookup and missing-translation tracking configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale in which translation keys are written (default: en_us)
        I18N_RECORD_MISSING_KEYS: Record keys absent from a store (default: true)
        I18N_RECORD_MISSING_TRANSLATIONS: Record keys lacking a translation for
            the requested locale (default: true)

    Example:
        ```python
        from localekit.configuration import settings

        default_locale = settings.i18n.DEFAULT_LOCALE
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en_us", alias="I18N_DEFAULT_LOCALE")
    RECORD_MISSING_KEYS: bool = Field(default=True, alias="I18N_RECORD_MISSING_KEYS")
    RECORD_MISSING_TRANSLATIONS: bool = Field(
        default=True, alias="I18N_RECORD_MISSING_TRANSLATIONS"
    )

    @field_validator("DEFAULT_LOCALE", mode="before")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Normalize the default locale and reject empty values."""
        value = str(v).strip().lower().rstrip("_")
        if not value:
            raise ValueError("I18N_DEFAULT_LOCALE must not be empty")
        return value
