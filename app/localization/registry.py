"""Locale registry interface and implementations.

A registry answers exact-id lookups of raw locale data. It never falls back
to ancestor locales; all inheritance lives in the resolution engine.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from core.logging import get_module_logger
from localization.models import RegistryKind
from localization.plurals import SYSTEM_CONFIGS, get_plural_rule

logger = get_module_logger()

TRANSLATIONS_FILE = "translations.yml"
CONFIG_FILE = "config.yml"


class LocaleRegistry(ABC):
    """Abstract base for locale registries.

    Implementations define how application translations and configs are
    found. System configs default to the built-in per-language configs.
    """

    def __init__(self, system_configs: Optional[Mapping[str, Any]] = None):
        self.system_configs: Dict[str, Any] = dict(
            SYSTEM_CONFIGS if system_configs is None else system_configs
        )

    def lookup(self, kind: RegistryKind, locale_id: str) -> Optional[Any]:
        """Return the raw object stored for an exact locale id.

        Args:
            kind: Kind of data requested.
            locale_id: Exact locale id, no ancestor fallback.

        Returns:
            Raw stored object, or None if absent.
        """
        if kind is RegistryKind.SYSTEM_CONFIG:
            return self.system_configs.get(locale_id)
        return self._lookup(kind, locale_id)

    @abstractmethod
    def _lookup(self, kind: RegistryKind, locale_id: str) -> Optional[Any]:
        """Look up application translations or config for a locale id."""
        pass


class InMemoryLocaleRegistry(LocaleRegistry):
    """Registry backed by plain dictionaries.

    Attributes:
        translations: Mapping of locale id to raw (possibly nested) translations.
        configs: Mapping of locale id to partial config mapping.
    """

    def __init__(
        self,
        translations: Optional[Dict[str, Any]] = None,
        configs: Optional[Dict[str, Any]] = None,
        system_configs: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(system_configs)
        self.translations: Dict[str, Any] = dict(translations or {})
        self.configs: Dict[str, Any] = dict(configs or {})

    def _lookup(self, kind: RegistryKind, locale_id: str) -> Optional[Any]:
        if kind is RegistryKind.TRANSLATIONS:
            return self.translations.get(locale_id)
        return self.configs.get(locale_id)

    def set_translations(self, locale_id: str, translations: Dict[str, Any]) -> None:
        """Replace the raw translations stored for a locale id."""
        self.translations[locale_id] = translations

    def set_config(self, locale_id: str, config: Dict[str, Any]) -> None:
        """Replace the application config stored for a locale id."""
        self.configs[locale_id] = config


class YAMLLocaleRegistry(LocaleRegistry):
    """Registry reading YAML files from one directory per locale.

    Expects:
        <locales_dir>/<locale_id>/translations.yml
        <locales_dir>/<locale_id>/config.yml

    A config's plural_form is the id of a built-in plural rule (e.g. "ru").

    Attributes:
        locales_dir: Path to directory containing locale directories.
        use_cache: Whether parsed files are kept in memory.
        cache: Cache of parsed documents keyed by (kind, locale id).
    """

    def __init__(
        self,
        locales_dir: Path,
        use_cache: bool = True,
        system_configs: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(system_configs)
        self.locales_dir = Path(locales_dir)
        self.use_cache = use_cache
        self.cache: Dict[Tuple[RegistryKind, str], Optional[Dict[str, Any]]] = {}

        if not self.locales_dir.exists():
            raise ValueError(f"Locales directory not found: {self.locales_dir}")

        logger.info(
            "initialized_yaml_registry",
            locales_dir=str(self.locales_dir),
            use_cache=use_cache,
        )

    def _lookup(self, kind: RegistryKind, locale_id: str) -> Optional[Any]:
        cache_key = (kind, locale_id)
        if self.use_cache and cache_key in self.cache:
            return self.cache[cache_key]

        filename = TRANSLATIONS_FILE if kind is RegistryKind.TRANSLATIONS else CONFIG_FILE
        data = self._read_yaml(self.locales_dir / locale_id / filename)
        if data is None:
            logger.debug("locale_data_not_found", key=kind.key(locale_id))
        elif kind is RegistryKind.CONFIG:
            data = self._parse_config(data, locale_id)

        if self.use_cache:
            self.cache[cache_key] = data
        return data

    def _read_yaml(self, path: Path) -> Optional[Dict[str, Any]]:
        """Parse a YAML document, returning None for absent or empty files.

        Raises:
            ValueError: If YAML parsing fails.
        """
        if not path.is_file():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if data is None:
            return None
        if not isinstance(data, dict):
            logger.warning("invalid_yaml_format", file=str(path), expected="dict")
            return None

        logger.info("loaded_locale_file", file=str(path), key_count=len(data))
        return data

    def _parse_config(self, data: Dict[str, Any], locale_id: str) -> Dict[str, Any]:
        config = dict(data)
        plural_form = config.get("plural_form")
        if isinstance(plural_form, str):
            try:
                config["plural_form"] = get_plural_rule(plural_form)
            except KeyError:
                logger.warning(
                    "unknown_plural_rule",
                    locale=locale_id,
                    plural_form=plural_form,
                )
                config["plural_form"] = None
        return config

    def available_locales(self) -> List[str]:
        """List locale ids that have a directory in locales_dir."""
        return sorted(
            path.name for path in self.locales_dir.iterdir() if path.is_dir()
        )

    def clear_cache(self) -> None:
        """Clear all cached documents."""
        self.cache.clear()
        logger.info("cleared_registry_cache")
