"""Factory functions for creating localization components.

Provides convenience functions for initializing the service with default
configurations taken from settings.
"""

from pathlib import Path
from typing import Optional

import structlog

from core.config import settings
from localization.registry import YAMLLocaleRegistry
from localization.service import I18nService

logger = structlog.get_logger()


def create_i18n_service(
    locales_dir: Optional[Path] = None,
    default_locale: Optional[str] = None,
    default_config_locale: Optional[str] = None,
    use_cache: Optional[bool] = None,
) -> I18nService:
    """Create an I18nService backed by YAML locale files.

    Arguments left as None are taken from settings.i18n. If no locales
    directory is configured, app/locales is used.

    Args:
        locales_dir: Directory with one sub-directory per locale id.
        default_locale: Locale used when callers do not pass one.
        default_config_locale: Locale whose system config fills unset options.
        use_cache: Whether the registry caches parsed YAML.

    Returns:
        I18nService: Configured service

    Raises:
        ValueError: If locales_dir does not exist

    Usage:
        service = create_i18n_service()
        service.t("common.welcome", locale="fr-CA")
    """
    i18n_settings = settings.i18n

    if locales_dir is None:
        if i18n_settings.LOCALES_DIR:
            locales_dir = Path(i18n_settings.LOCALES_DIR)
        else:
            # This file is at .../app/localization/factory.py
            locales_dir = Path(__file__).resolve().parents[1] / "locales"

    registry = YAMLLocaleRegistry(
        locales_dir=locales_dir,
        use_cache=i18n_settings.USE_CACHE if use_cache is None else use_cache,
    )
    service = I18nService(
        registry,
        default_locale=default_locale or i18n_settings.DEFAULT_LOCALE,
        default_config_locale=default_config_locale
        or i18n_settings.DEFAULT_CONFIG_LOCALE,
    )

    logger.info(
        "i18n_service_created",
        locales_dir=str(locales_dir),
        available_locales=registry.available_locales(),
    )
    return service
