"""Feature-level fixtures for localization tests.

Provides registries with a small locale hierarchy and YAML locale directories.
"""

import pytest
import yaml

from localization import YAMLLocaleRegistry
from tests.factories.i18n import make_config, make_registry


@pytest.fixture
def hierarchy_registry():
    """Registry with en, en-US and en-US-x translations.

    Only "en" carries an application config.
    """
    return make_registry(
        translations={
            "en": {
                "greeting": "Hi",
                "farewell": "Bye",
                "color": {"label": "Color"},
            },
            "en-US": {
                "greeting": "Hiya",
            },
            "en-US-x": {
                "color": {"label": "Colour"},
            },
        },
        configs={"en": make_config(rtl=False)},
    )


@pytest.fixture
def plural_registry():
    """Registry with a plural-aware table for "en"."""
    return make_registry(
        translations={
            "en": {
                "item": "fallback",
                "item.one": "1 item",
                "item.other": "{count} items",
                "generic": {"key": "Generic"},
            }
        },
    )


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create temporary directory with sample YAML locale files.

    Returns a directory structure like:
    - en/translations.yml
    - en/config.yml
    - ru/translations.yml
    - ru/config.yml
    - ru-UA/translations.yml
    """
    locales = {
        "en": {
            "translations.yml": {
                "common": {"save": "Save", "welcome": "Welcome, {{name}}"},
                "inbox": {"one": "1 message", "other": "{{count}} messages"},
            },
            "config.yml": {"rtl": False, "plural_form": "en"},
        },
        "ru": {
            "translations.yml": {
                "common": {"save": "Сохранить"},
                "inbox": {
                    "one": "{{count}} сообщение",
                    "few": "{{count}} сообщения",
                    "many": "{{count}} сообщений",
                },
            },
            "config.yml": {"plural_form": "ru"},
        },
        "ru-UA": {
            "translations.yml": {"common": {"save": "Зберегти"}},
        },
    }

    for locale_id, files in locales.items():
        locale_dir = tmp_path / locale_id
        locale_dir.mkdir()
        for filename, data in files.items():
            with open(locale_dir / filename, "w", encoding="utf-8") as f:
                yaml.dump(data, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_registry(temp_locales_dir):
    """Create YAMLLocaleRegistry for the temporary locales directory."""
    return YAMLLocaleRegistry(temp_locales_dir, use_cache=False)
