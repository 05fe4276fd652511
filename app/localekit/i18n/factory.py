"""Factory functions for creating i18n components.

This is the composition root: it builds the diagnostics registry from
settings and wires it into resolvers and services.
"""

from typing import Optional

from localekit.configuration import Settings, settings as default_settings
from localekit.i18n.context import LocaleContext, LocaleProvider
from localekit.i18n.diagnostics import DiagnosticsRegistry
from localekit.i18n.resolver import Resolver
from localekit.i18n.service import TranslationService
from localekit.i18n.store import BaseTranslations, Translations
from localekit.logging import get_module_logger

logger = get_module_logger()


def create_translations(settings: Optional[Settings] = None) -> Translations:
    """Create an empty store using the configured default locale."""
    settings = settings or default_settings
    return Translations(settings.i18n.DEFAULT_LOCALE)


def create_resolver(
    settings: Optional[Settings] = None,
    locale_provider: Optional[LocaleProvider] = None,
    registry: Optional[DiagnosticsRegistry] = None,
) -> Resolver:
    """Create a Resolver with a registry configured from settings.

    Args:
        settings: Settings instance (default: module singleton)
        locale_provider: Returns the current locale (default: none)
        registry: Existing registry to share (default: a new one from settings)

    Returns:
        Resolver: Configured resolver
    """
    settings = settings or default_settings
    registry = registry or DiagnosticsRegistry.from_settings(settings.i18n)
    return Resolver(registry=registry, locale_provider=locale_provider)


def create_service(
    translations: BaseTranslations,
    settings: Optional[Settings] = None,
    locale: Optional[str] = None,
    registry: Optional[DiagnosticsRegistry] = None,
) -> TranslationService:
    """Create a TranslationService for a store.

    Args:
        translations: Store used for every lookup
        settings: Settings instance (default: module singleton)
        locale: Initial current locale (default: the store's default locale)
        registry: Existing registry to share (default: a new one from settings)

    Returns:
        TranslationService: Configured service

    Usage:
        service = create_service(translations, locale="pt_br")
        service.translate("Hello")
    """
    locale_context = LocaleContext(locale)
    resolver = create_resolver(
        settings=settings, locale_provider=locale_context, registry=registry
    )
    logger.info(
        "translation_service_created",
        default_locale=translations.default_locale,
        locale=locale_context.get(),
        key_count=len(translations),
    )
    return TranslationService(
        translations, resolver=resolver, locale_context=locale_context
    )
