"""Flattening and ancestor merging of translation tables."""

from typing import Any, Dict, Mapping, Optional

from localization.models import RegistryKind, parent_locale
from localization.registry import LocaleRegistry


def flatten(tree: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Flatten a nested translation tree into dotted-path keys.

    Only mappings are descended into; strings and compiled templates are
    leaves.

    Args:
        tree: Nested mapping, or None.

    Returns:
        Dict such as {"a.b": "x", "d": "z"} for {"a": {"b": "x"}, "d": "z"}.
    """
    result: Dict[str, Any] = {}
    if not tree:
        return result

    for key, value in tree.items():
        if isinstance(value, Mapping):
            for suffix, leaf in flatten(value).items():
                result[f"{key}.{suffix}"] = leaf
        else:
            result[key] = value

    return result


def build_translations(locale_id: str, registry: LocaleRegistry) -> Dict[str, Any]:
    """Build the merged, flattened translation table for a locale.

    Ancestors are merged first so that more specific locales override
    identical keys.

    Args:
        locale_id: Locale id (e.g., "pt-BR").
        registry: Source of raw translations.

    Returns:
        New flattened table; the registry is not modified.
    """
    result: Dict[str, Any] = {}

    parent_id = parent_locale(locale_id)
    if parent_id:
        result.update(build_translations(parent_id, registry))

    result.update(flatten(registry.lookup(RegistryKind.TRANSLATIONS, locale_id)))
    return result
