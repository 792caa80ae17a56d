"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    english_plural,
    make_config,
    make_locale,
    make_registry,
    make_translations,
)

__all__ = [
    "english_plural",
    "make_config",
    "make_locale",
    "make_registry",
    "make_translations",
]
