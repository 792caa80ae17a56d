"""Locale config resolution across a locale's ancestor chain.

Walks configs from most specific to least specific; the first value seen for
each option wins, with application configs taking precedence over system
configs at the same level.
"""

from typing import Any, Iterator, Optional

import structlog

from localization.models import LocaleConfig, PluralForm, RegistryKind, locale_ancestors
from localization.plurals import DEFAULT_CONFIG_LOCALE, plural_other
from localization.registry import LocaleRegistry

logger = structlog.get_logger().bind(component="i18n.resolver")


def walk_configs(locale_id: str, registry: LocaleRegistry) -> Iterator[Any]:
    """Yield config entries for a locale and its ancestors.

    Order per level: application config, then system config.

    Args:
        locale_id: Most specific locale id to start from.
        registry: Source of raw configs.

    Yields:
        Config mappings that exist in the registry.
    """
    for current in locale_ancestors(locale_id):
        app_config = registry.lookup(RegistryKind.CONFIG, current)
        if app_config:
            yield app_config

        system_config = registry.lookup(RegistryKind.SYSTEM_CONFIG, current)
        if system_config:
            yield system_config


def resolve_config(
    locale_id: str,
    registry: LocaleRegistry,
    rtl: Optional[bool] = None,
    plural_form: Optional[PluralForm] = None,
    default_locale: str = DEFAULT_CONFIG_LOCALE,
) -> LocaleConfig:
    """Resolve rtl and plural_form for a locale.

    Values passed in are treated as already resolved and are never replaced.

    Args:
        locale_id: Locale id to resolve.
        registry: Source of raw configs.
        rtl: Previously resolved rtl, if any.
        plural_form: Previously resolved plural rule, if any.
        default_locale: Locale whose system config fills unset fields.

    Returns:
        LocaleConfig with both fields set.
    """
    for config in walk_configs(locale_id, registry):
        if rtl is None:
            rtl = config.get("rtl")
        if plural_form is None:
            plural_form = config.get("plural_form")
        if rtl is not None and plural_form is not None:
            break

    if rtl is not None and plural_form is not None:
        return LocaleConfig(rtl=rtl, plural_form=plural_form)

    default_config = registry.lookup(RegistryKind.SYSTEM_CONFIG, default_locale) or {}
    log = logger.bind(locale=locale_id, default_locale=default_locale)

    if rtl is None:
        log.warning("no_rtl_configuration")
        rtl = default_config.get("rtl", False)

    if plural_form is None:
        log.warning("no_plural_form_configuration")
        plural_form = default_config.get("plural_form") or plural_other

    return LocaleConfig(rtl=bool(rtl), plural_form=plural_form)
