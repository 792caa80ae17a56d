"""Plural rules and built-in system locale configs.

Each language maps a count to one of the CLDR inflection tags. The system
configs are the addon-level defaults consulted after application configs
at the same locale level.
"""

from typing import Any, Dict

from localization.models import PluralForm

ZERO = "zero"
ONE = "one"
TWO = "two"
FEW = "few"
MANY = "many"
OTHER = "other"

DEFAULT_CONFIG_LOCALE = "zh"


def _is_integer(n) -> bool:
    return float(n).is_integer()


def plural_other(n) -> str:
    """Languages without plural inflection (zh, ja, ko, ...)."""
    return OTHER


def plural_one_other(n) -> str:
    """Germanic and most Romance languages: 1 is singular."""
    return ONE if n == 1 else OTHER


def plural_zero_one_other(n) -> str:
    """French-style rule where 0 and 1 are both singular."""
    return ONE if 0 <= n < 2 else OTHER


def plural_east_slavic(n) -> str:
    # ru, uk
    if not _is_integer(n):
        return OTHER
    n = int(abs(n))
    mod10 = n % 10
    mod100 = n % 100
    if mod10 == 1 and mod100 != 11:
        return ONE
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return FEW
    return MANY


def plural_polish(n) -> str:
    if not _is_integer(n):
        return OTHER
    n = int(abs(n))
    if n == 1:
        return ONE
    mod10 = n % 10
    mod100 = n % 100
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return FEW
    return MANY


def plural_west_slavic(n) -> str:
    # cs, sk
    if not _is_integer(n):
        return MANY
    if n == 1:
        return ONE
    if 2 <= n <= 4:
        return FEW
    return OTHER


def plural_arabic(n) -> str:
    if not _is_integer(n):
        return OTHER
    n = int(abs(n))
    mod100 = n % 100
    if n == 0:
        return ZERO
    if n == 1:
        return ONE
    if n == 2:
        return TWO
    if 3 <= mod100 <= 10:
        return FEW
    if 11 <= mod100 <= 99:
        return MANY
    return OTHER


def plural_hebrew(n) -> str:
    if n == 1:
        return ONE
    if n == 2:
        return TWO
    if _is_integer(n) and n != 0 and n % 10 == 0:
        return MANY
    return OTHER


PLURAL_RULES: Dict[str, PluralForm] = {
    "ar": plural_arabic,
    "cs": plural_west_slavic,
    "de": plural_one_other,
    "en": plural_one_other,
    "es": plural_one_other,
    "fa": plural_zero_one_other,
    "fr": plural_zero_one_other,
    "he": plural_hebrew,
    "it": plural_one_other,
    "ja": plural_other,
    "ko": plural_other,
    "nl": plural_one_other,
    "pl": plural_polish,
    "pt": plural_zero_one_other,
    "ru": plural_east_slavic,
    "sk": plural_west_slavic,
    "uk": plural_east_slavic,
    "ur": plural_one_other,
    "zh": plural_other,
}

RTL_LANGUAGES = frozenset({"ar", "fa", "he", "ur"})

SYSTEM_CONFIGS: Dict[str, Dict[str, Any]] = {
    language: {"rtl": language in RTL_LANGUAGES, "plural_form": rule}
    for language, rule in PLURAL_RULES.items()
}


def get_plural_rule(name: str) -> PluralForm:
    """Get the built-in plural rule for a language id.

    Args:
        name: Language id (e.g., "ru").

    Returns:
        Plural rule function.

    Raises:
        KeyError: If no rule is defined for the language.
    """
    try:
        return PLURAL_RULES[name]
    except KeyError as e:
        raise KeyError(f"No plural rule defined for: {name}") from e
