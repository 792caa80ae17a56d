"""Core data structures for locale resolution.

Defines locale id helpers, resolved locale configuration, lookup results and
the tagged variants stored in a locale's translation table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, NamedTuple, Optional, Union

PluralForm = Callable[[Any], str]


class RegistryKind(str, Enum):
    """Kinds of raw data a locale registry can hold for a locale id."""

    TRANSLATIONS = "translations"
    CONFIG = "config"
    SYSTEM_CONFIG = "system-config"

    def key(self, locale_id: str) -> str:
        """Return the registry path for a locale id.

        Returns:
            Path such as "locale/pt-BR/translations" or "system-config/pt".
        """
        if self is RegistryKind.SYSTEM_CONFIG:
            return f"system-config/{locale_id}"
        return f"locale/{locale_id}/{self.value}"


def parent_locale(locale_id: str) -> Optional[str]:
    """Get the parent of a locale id by dropping its last dash segment.

    Args:
        locale_id: Locale id (e.g., "pt-BR", "zh-Hant-TW").

    Returns:
        Parent id ("pt", "zh-Hant"), or None when there is no parent.
    """
    last_dash = locale_id.rfind("-")
    return locale_id[:last_dash] if last_dash > 0 else None


def locale_ancestors(locale_id: str) -> List[str]:
    """List a locale id and its ancestors, most specific first."""
    chain = []
    current: Optional[str] = locale_id
    while current:
        chain.append(current)
        current = parent_locale(current)
    return chain


@dataclass(frozen=True)
class LocaleConfig:
    """Fully resolved configuration for a locale.

    Attributes:
        rtl: Whether text in this locale is written right-to-left.
        plural_form: Function mapping a count to an inflection tag.
    """

    rtl: bool
    plural_form: PluralForm


class LookupResult(NamedTuple):
    """Outcome of walking a fallback chain.

    key is the last candidate examined, so it names the final candidate even
    when nothing matched and result is None.
    """

    key: Optional[str]
    result: Any


@dataclass(frozen=True)
class SourceEntry:
    """Uncompiled template source string."""

    key: str
    source: str


@dataclass(frozen=True)
class CompiledEntry:
    """Template that is ready to render."""

    key: str
    template: Callable[..., Any]


@dataclass(frozen=True)
class MissingEntry:
    """Stand-in template rendering a missing-translation indicator."""

    key: str
    template: Callable[..., Any]


RawEntry = Union[SourceEntry, CompiledEntry, MissingEntry]
