"""Default template compiler and missing-translation stand-in.

Templates are callables taking an optional data dict and returning the
rendered string. Both the compiler and the missing-translation renderer are
injected into Locale, so these are only the defaults.
"""

import re
from typing import Any, Callable, Dict, List, Optional

from core.logging import get_module_logger

logger = get_module_logger()

RTL_EMBEDDING = "\u202b"
POP_DIRECTIONAL_FORMATTING = "\u202c"

_PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}|\{(\w+)\}")


def _placeholder_name(match: re.Match) -> str:
    return match.group(1) or match.group(2)


class CompiledTemplate:
    """Renderable template compiled from a source string.

    Attributes:
        source: Original template source.
        rtl: Whether output is wrapped in RTL embedding marks.
        variables: Placeholder names, in order of first appearance.
    """

    def __init__(self, source: str, rtl: bool = False):
        self.source = source
        self.rtl = rtl

        self.variables: List[str] = []
        for match in _PLACEHOLDER_PATTERN.finditer(source):
            name = _placeholder_name(match)
            if name not in self.variables:
                self.variables.append(name)

    def __call__(self, data: Optional[Dict[str, Any]] = None) -> str:
        """Render the template.

        Replaces {{name}} and {name} with values from data in a single pass,
        so substituted values are never scanned for placeholders.

        Args:
            data: Dict of variable name -> value.

        Returns:
            Rendered string.

        Raises:
            ValueError: If a placeholder has no value in data.
        """
        data = data or {}
        for name in self.variables:
            if name not in data:
                logger.error(
                    "missing_interpolation_variable",
                    variable=name,
                    available_variables=list(data.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {name}")

        result = _PLACEHOLDER_PATTERN.sub(
            lambda m: str(data[_placeholder_name(m)]), self.source
        )

        if self.rtl:
            return f"{RTL_EMBEDDING}{result}{POP_DIRECTIONAL_FORMATTING}"
        return result

    def __repr__(self) -> str:
        return f"CompiledTemplate({self.source!r}, rtl={self.rtl})"


def compile_template(source: str, rtl: bool = False) -> CompiledTemplate:
    """Compile a template source string."""
    return CompiledTemplate(source, rtl)


def missing_message(locale_id: str, key: str, data: Optional[Dict[str, Any]]) -> str:
    """Render the indicator shown in place of a missing translation."""
    logger.warning("missing_translation", locale=locale_id, key=key)
    return f"Missing translation: {key}"


class MissingTranslationTemplate:
    """Stand-in template for a key with no translation.

    Rendering is deferred to call time so diagnostics surface where the
    text is actually used.
    """

    is_missing = True

    def __init__(
        self,
        locale_id: str,
        key: str,
        renderer: Callable[[str, str, Optional[Dict[str, Any]]], Any] = missing_message,
    ):
        self.locale_id = locale_id
        self.key = key
        self.renderer = renderer

    def __call__(self, data: Optional[Dict[str, Any]] = None) -> Any:
        return self.renderer(self.locale_id, self.key, data)

    def __repr__(self) -> str:
        return f"MissingTranslationTemplate({self.locale_id!r}, {self.key!r})"
