"""Localization engine - locale inheritance, plural selection and template lookup.

Resolves translation keys to renderable templates for a requested locale,
merging translations and configuration across the locale's ancestor chain
(e.g. "pt-BR" falls back to "pt").

Main components:
- models: parent_locale, LocaleConfig, LookupResult, RawEntry variants
- registry: LocaleRegistry, InMemoryLocaleRegistry and YAMLLocaleRegistry
- translations: flatten and build_translations
- resolvers: walk_configs and resolve_config
- locale: Locale, the per-locale lookup and template cache
- service: I18nService owning Locale instances
"""

from localization.locale import Locale
from localization.models import (
    CompiledEntry,
    LocaleConfig,
    LookupResult,
    MissingEntry,
    RegistryKind,
    SourceEntry,
    parent_locale,
)
from localization.registry import (
    InMemoryLocaleRegistry,
    LocaleRegistry,
    YAMLLocaleRegistry,
)
from localization.resolvers import resolve_config, walk_configs
from localization.service import I18nService
from localization.templates import (
    CompiledTemplate,
    MissingTranslationTemplate,
    compile_template,
)
from localization.translations import build_translations, flatten

__all__ = [
    "Locale",
    "LocaleConfig",
    "LookupResult",
    "SourceEntry",
    "CompiledEntry",
    "MissingEntry",
    "RegistryKind",
    "parent_locale",
    "LocaleRegistry",
    "InMemoryLocaleRegistry",
    "YAMLLocaleRegistry",
    "flatten",
    "build_translations",
    "walk_configs",
    "resolve_config",
    "I18nService",
    "CompiledTemplate",
    "MissingTranslationTemplate",
    "compile_template",
]
