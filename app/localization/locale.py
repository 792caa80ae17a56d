"""Locale: the work-horse of translation look-up.

On construction a Locale:
1. merges the flattened translations of the locale (e.g. pt-BR) and all
   parent locales (e.g. pt), more specific locales winning;
2. walks the configs from most specific to least specific and uses the
   first value for rtl and plural_form;
3. falls back to the default config locale for anything still unset.

Source translations and compiled templates are kept in separate tables.
Lookups see the compiled table layered over the source table.
"""

from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from core.logging import get_module_logger
from localization.models import (
    CompiledEntry,
    LookupResult,
    MissingEntry,
    PluralForm,
    RawEntry,
    SourceEntry,
)
from localization.plurals import DEFAULT_CONFIG_LOCALE
from localization.registry import LocaleRegistry
from localization.resolvers import resolve_config
from localization.templates import (
    MissingTranslationTemplate,
    compile_template,
    missing_message,
)
from localization.translations import build_translations

logger = get_module_logger()

TemplateCompiler = Callable[[str, bool], Callable[..., Any]]
MissingRenderer = Callable[[str, str, Optional[Dict[str, Any]]], Any]


class Locale:
    """Resolved translations and configuration for a single locale id.

    Attributes:
        id: Locale id (e.g., "pt-BR").
        registry: Source of raw translations and configs.
        translations: Merged, flattened source table, or None while unbuilt.
        templates: Compiled templates and missing stand-ins, keyed like
            translations.
        rtl: Resolved text direction.
        plural_form: Resolved plural rule.
    """

    def __init__(
        self,
        id: str,
        registry: LocaleRegistry,
        compiler: TemplateCompiler = compile_template,
        missing_renderer: MissingRenderer = missing_message,
        default_config_locale: str = DEFAULT_CONFIG_LOCALE,
    ):
        self.id = id
        self.registry = registry
        self.compiler = compiler
        self.missing_renderer = missing_renderer
        self.default_config_locale = default_config_locale

        self.translations: Optional[Dict[str, Any]] = None
        self.templates: Dict[str, Callable[..., Any]] = {}
        self.rtl: Optional[bool] = None
        self.plural_form: Optional[PluralForm] = None

        self.rebuild()

    def rebuild(self, reset_config: bool = False) -> None:
        """Recompute translations and config from the registry.

        The translation and template tables are replaced, never mutated, so
        holders of the old tables keep a consistent view.

        Args:
            reset_config: Re-resolve rtl and plural_form from scratch. By
                default values resolved earlier are kept.
        """
        if reset_config:
            self.rtl = None
            self.plural_form = None

        self.templates = {}
        self.translations = build_translations(self.id, self.registry)
        self._set_config()

        logger.debug(
            "locale_built",
            locale=self.id,
            key_count=len(self.translations),
            rtl=self.rtl,
        )

    def _set_config(self) -> None:
        config = resolve_config(
            self.id,
            self.registry,
            rtl=self.rtl,
            plural_form=self.plural_form,
            default_locale=self.default_config_locale,
        )
        self.rtl = config.rtl
        self.plural_form = config.plural_form

    def _get(self, key: str) -> Any:
        template = self.templates.get(key)
        if template is not None:
            return template
        return self.translations.get(key)

    def _find(
        self,
        fallback_keys: Sequence[str],
        count: Optional[Any],
    ) -> Tuple[Optional[str], Optional[str], Any]:
        """Walk the fallback chain.

        Returns:
            (candidate key, exact key that matched or None, value)
        """
        if self.translations is None:
            self.rebuild()

        key = None
        for key in fallback_keys:
            if count is not None:
                inflected = f"{key}.{self.plural_form(count)}"
                result = self._get(inflected)
                if result is not None:
                    return key, inflected, result

            result = self._get(key)
            if result is not None:
                return key, key, result

        return key, None, None

    def find_translation(
        self,
        fallback_keys: Sequence[str],
        count: Optional[Any] = None,
    ) -> LookupResult:
        """Find the first candidate key with a value.

        For each candidate, "<key>.<inflection>" is tried before the bare key
        when a count is given.

        Args:
            fallback_keys: Candidate keys, most preferred first.
            count: Optional count selecting a plural form.

        Returns:
            LookupResult of the matching candidate and its value. If nothing
            matched, the key is the last candidate and the result is None.
        """
        key, _, result = self._find(fallback_keys, count)
        return LookupResult(key=key, result=result)

    def resolve_entry(
        self,
        fallback_keys: Sequence[str],
        count: Optional[Any] = None,
    ) -> Optional[RawEntry]:
        """Find a translation and classify what is stored for it.

        The entry key is the exact key that matched, including any inflection.

        Returns:
            SourceEntry, CompiledEntry or MissingEntry, or None if nothing matched.
        """
        _, key, result = self._find(fallback_keys, count)
        if key is None:
            return None
        if isinstance(result, str):
            return SourceEntry(key=key, source=result)
        if getattr(result, "is_missing", False):
            return MissingEntry(key=key, template=result)
        return CompiledEntry(key=key, template=result)

    def get_compiled_template(
        self,
        fallback_keys: Sequence[str],
        count: Optional[Any] = None,
    ) -> Callable[..., Any]:
        """Get a renderable template for the best matching key.

        Source strings are compiled once and cached at the matched key. When no
        candidate matches, a missing-translation stand-in is cached at the first
        candidate.

        Args:
            fallback_keys: Candidate keys, most preferred first.
            count: Optional count selecting a plural form.

        Returns:
            Callable template.

        Raises:
            AssertionError: If the stored value is not callable.
        """
        assert fallback_keys, f"No translation keys given in {self.id}"

        entry = self.resolve_entry(fallback_keys, count)

        if entry is None:
            result = self._define_missing_translation_template(fallback_keys[0])
            key = fallback_keys[0]
        elif isinstance(entry, SourceEntry):
            result = self._compile_template(entry.key, entry.source)
            key = entry.key
        else:
            result = entry.template
            key = entry.key

        assert callable(result), f"Template for {key} in {self.id} is not a function"

        return result

    def _define_missing_translation_template(self, key: str) -> MissingTranslationTemplate:
        template = MissingTranslationTemplate(self.id, key, self.missing_renderer)
        self.templates[key] = template
        return template

    def _compile_template(self, key: str, source: str) -> Callable[..., Any]:
        template = self.compiler(source, self.rtl)
        self.templates[key] = template
        return template

    def __repr__(self) -> str:
        return f"Locale({self.id!r})"
