"""Translation service owning one Locale per requested locale id.

Provides a class-based interface to the localization engine for easier DI
and testing.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from core.logging import get_module_logger
from localization.locale import Locale, MissingRenderer, TemplateCompiler
from localization.plurals import DEFAULT_CONFIG_LOCALE
from localization.registry import LocaleRegistry
from localization.templates import compile_template, missing_message

logger = get_module_logger()


class I18nService:
    """Class-based translation service.

    Locales are created on first request and reused afterwards.

    Usage:
        registry = InMemoryLocaleRegistry(
            translations={"en": {"inbox": {"one": "1 message", "other": "{{count}} messages"}}},
        )
        service = I18nService(registry, default_locale="en")
        service.t("inbox", data={"count": 3})  # "3 messages"

    Attributes:
        registry: Source of raw translations and configs.
        default_locale: Locale used when a caller does not pass one.
        locales: Loaded Locale instances by id.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        default_locale: str = "en",
        compiler: TemplateCompiler = compile_template,
        missing_renderer: MissingRenderer = missing_message,
        default_config_locale: str = DEFAULT_CONFIG_LOCALE,
    ):
        self.registry = registry
        self.default_locale = default_locale
        self.compiler = compiler
        self.missing_renderer = missing_renderer
        self.default_config_locale = default_config_locale
        self.locales: Dict[str, Locale] = {}
        logger.info("initialized_i18n_service", default_locale=default_locale)

    def locale_for(self, locale_id: Optional[str] = None) -> Locale:
        """Get the Locale for an id, creating it on first request.

        Args:
            locale_id: Locale id, or None for the default locale.

        Returns:
            Locale instance.
        """
        locale_id = locale_id or self.default_locale
        locale = self.locales.get(locale_id)
        if locale is None:
            locale = Locale(
                locale_id,
                self.registry,
                compiler=self.compiler,
                missing_renderer=self.missing_renderer,
                default_config_locale=self.default_config_locale,
            )
            self.locales[locale_id] = locale
            logger.info("loaded_locale", locale=locale_id)
        return locale

    def t(
        self,
        key: str,
        locale: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        default: Optional[Union[str, Sequence[str]]] = None,
    ) -> Any:
        """Translate and render a key.

        Args:
            key: Preferred translation key.
            locale: Locale id, or None for the default locale.
            data: Interpolation variables. A "count" entry selects the plural form.
            default: Fallback key or keys tried after key.

        Returns:
            Rendered translation, or the missing-translation indicator.
        """
        data = data or {}
        template = self.locale_for(locale).get_compiled_template(
            _fallback_chain(key, default), data.get("count")
        )
        return template(data)

    def exists(self, key: str, locale: Optional[str] = None) -> bool:
        """Check if a real translation (not a stand-in) exists for a key."""
        result = self.locale_for(locale).find_translation([key]).result
        return result is not None and not getattr(result, "is_missing", False)

    def is_rtl(self, locale: Optional[str] = None) -> bool:
        """Check if a locale is written right-to-left."""
        return self.locale_for(locale).rtl

    def loaded_locales(self) -> List[str]:
        """Get ids of the locales created so far."""
        return list(self.locales.keys())

    def rebuild(self, reset_config: bool = False) -> None:
        """Rebuild every loaded locale from the registry.

        Args:
            reset_config: Also re-resolve rtl and plural_form.
        """
        for locale in self.locales.values():
            locale.rebuild(reset_config=reset_config)
        logger.info(
            "rebuilt_locales",
            locale_count=len(self.locales),
            reset_config=reset_config,
        )


def _fallback_chain(
    key: str, default: Optional[Union[str, Sequence[str]]]
) -> List[str]:
    if default is None:
        return [key]
    if isinstance(default, str):
        return [key, default]
    return [key, *default]
