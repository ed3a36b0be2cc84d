"""Translator service: the public API over one I18nContext.

Each Translator owns its context (configuration, translation store and
rule registries), so independent translators can serve different locales
side by side.
"""

import re
from typing import Any, Mapping, Optional, Pattern, Union

from localekit.i18n import dates, numbers
from localekit.i18n.interpolation import interpolate
from localekit.i18n.lookup import Scope, get_full_scope, lookup
from localekit.i18n.missing import missing_translation
from localekit.i18n.models import (
    I18nContext,
    MissingBehaviour,
    RuntimeConfig,
)
from localekit.i18n.options import deep_merge, prepare_options
from localekit.i18n.pluralization import PluralizationRules, pluralize
from localekit.i18n.resolvers import LocaleResolver
from localekit.i18n.translation import translate
from localekit.logging import get_module_logger

logger = get_module_logger()

_DATE_OR_TIME = re.compile(r"^(date|time)")


class Translator:
    """Translate, pluralize and localize values for a runtime-selected locale.

    Attributes:
        context: The I18nContext all operations read.
        locales: LocaleResolver for registering custom locale rules.
        pluralization: PluralizationRules for registering plural rules.

    Usage:
        translator = Translator(translations={"en": {"hello": "Hello {{name}}"}})
        translator.t("hello", name="World")
        # "Hello World"
    """

    def __init__(
        self,
        translations: Optional[Mapping[str, Mapping[str, Any]]] = None,
        config: Optional[RuntimeConfig] = None,
    ):
        """Initialize Translator.

        Args:
            translations: Store mapping locale -> nested translation tree.
            config: Runtime configuration (default: RuntimeConfig()).
        """
        self.context = I18nContext(
            config=config or RuntimeConfig(),
            translations=translations if translations is not None else {},
        )
        self.locales = LocaleResolver(self.context)
        self.pluralization = PluralizationRules(self.context)
        logger.info(
            "initialized_translator",
            locale=self.context.config.locale,
            default_locale=self.context.config.default_locale,
            locale_count=len(self.context.translations),
        )

    # Configuration

    def reset(self) -> None:
        """Restore the default configuration and an empty store.

        Registered locale and pluralization rules are kept.
        """
        self.context.config = RuntimeConfig()
        self.context.translations = {}
        logger.info("reset_translator")

    @property
    def config(self) -> RuntimeConfig:
        return self.context.config

    @property
    def locale(self) -> Optional[str]:
        return self.context.config.locale

    @locale.setter
    def locale(self, value: Optional[str]) -> None:
        self.context.config.locale = value
        logger.debug("locale_changed", locale=value)

    @property
    def default_locale(self) -> str:
        return self.context.config.default_locale

    @default_locale.setter
    def default_locale(self, value: str) -> None:
        self.context.config.default_locale = value

    @property
    def fallbacks(self) -> bool:
        return self.context.config.fallbacks

    @fallbacks.setter
    def fallbacks(self, value: bool) -> None:
        self.context.config.fallbacks = bool(value)

    @property
    def missing_behaviour(self) -> MissingBehaviour:
        return self.context.config.missing_behaviour

    @missing_behaviour.setter
    def missing_behaviour(self, value: Union[str, MissingBehaviour]) -> None:
        self.context.config.missing_behaviour = MissingBehaviour.from_string(value)

    @property
    def missing_translation_prefix(self) -> str:
        return self.context.config.missing_translation_prefix

    @missing_translation_prefix.setter
    def missing_translation_prefix(self, value: Optional[str]) -> None:
        self.context.config.missing_translation_prefix = value or ""

    @property
    def separator(self) -> str:
        return self.context.config.separator

    @separator.setter
    def separator(self, value: str) -> None:
        if not value:
            raise ValueError("separator must not be empty")
        self.context.config.separator = value

    @property
    def placeholder(self) -> Pattern[str]:
        return self.context.config.placeholder

    @placeholder.setter
    def placeholder(self, value: Union[str, Pattern[str]]) -> None:
        pattern = re.compile(value) if isinstance(value, str) else value
        if pattern.groups < 1:
            raise ValueError("placeholder pattern must capture the placeholder name")
        self.context.config.placeholder = pattern

    @property
    def translations(self) -> Mapping[str, Mapping[str, Any]]:
        return self.context.translations

    @translations.setter
    def translations(self, value: Mapping[str, Mapping[str, Any]]) -> None:
        self.context.translations = value if value is not None else {}
        logger.info("translations_replaced", locale_count=len(self.context.translations))

    def store_translations(self, locale: str, tree: Mapping[str, Any]) -> None:
        """Deep-merge a translation tree into the store for a locale.

        The store is replaced by a merged copy; the previous mapping is left
        untouched.
        """
        store = dict(self.context.translations)
        store[locale] = deep_merge(dict(store.get(locale) or {}), tree)
        self.context.translations = store

    def current_locale(self) -> str:
        """Return the current locale, or the default locale if none is set."""
        return self.context.config.current_locale()

    # Core

    def lookup(self, scope: Scope, options: Optional[Mapping[str, Any]] = None) -> Any:
        return lookup(self.context, scope, options)

    def get_full_scope(self, scope: Scope, options: Optional[Mapping[str, Any]] = None) -> str:
        return get_full_scope(self.context, scope, options)

    def translate(
        self,
        scope: Scope,
        options: Optional[Mapping[str, Any]] = None,
        /,
        **kwargs: Any,
    ) -> Any:
        """Translate a scope.

        Args:
            scope: Dotted key or sequence of segments.
            options: Placeholder values plus ``locale``, ``scope``,
                ``count``, ``defaults`` and ``default_value``.
            **kwargs: Same as options; entries in options take precedence.

        Returns:
            The translated value or a missing-translation marker.
        """
        return translate(self.context, scope, prepare_options(options, kwargs))

    t = translate

    def interpolate(self, message: Any, options: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> Any:
        return interpolate(self.context, message, prepare_options(options, kwargs))

    def pluralize(
        self,
        count: Any,
        scope: Any,
        options: Optional[Mapping[str, Any]] = None,
        /,
        **kwargs: Any,
    ) -> str:
        """Pick the plural form of scope (a key or a subtree) for count."""
        return pluralize(self.context, count, scope, prepare_options(options, kwargs))

    p = pluralize

    def missing_translation(self, scope: Scope, options: Optional[Mapping[str, Any]] = None) -> str:
        return missing_translation(self.context, scope, options)

    # Formatting

    def to_number(self, number: Any, options: Optional[Mapping[str, Any]] = None) -> str:
        return numbers.to_number(self.context, number, options)

    def to_currency(self, number: Any, options: Optional[Mapping[str, Any]] = None) -> str:
        return numbers.to_currency(self.context, number, options)

    def to_percentage(self, number: Any, options: Optional[Mapping[str, Any]] = None) -> str:
        return numbers.to_percentage(self.context, number, options)

    def to_human_size(self, number: Any, options: Optional[Mapping[str, Any]] = None) -> str:
        return numbers.to_human_size(self.context, number, options)

    def parse_date(self, value: Any) -> dates.ParsedDate:
        return dates.parse_date(value)

    def strftime(self, value: Any, format: str) -> str:
        return dates.strftime(self.context, value, format)

    def to_time(self, scope: str, value: Any) -> str:
        return dates.to_time(self.context, scope, value)

    def localize(
        self,
        scope: str,
        value: Any,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Localize a value.

        ``currency``, ``number`` and ``percentage`` use the number
        formatters; scopes starting with ``date`` or ``time`` format value as
        a date with the format stored under scope. Anything else is converted
        with str(). The result is interpolated with options.
        """
        options = prepare_options(options)

        if scope == "currency":
            return self.to_currency(value, options)
        if scope == "number":
            return self.to_number(value, options)
        if scope == "percentage":
            return self.to_percentage(value, options)

        if _DATE_OR_TIME.match(scope):
            localized = self.to_time(scope, value)
        else:
            localized = str(value)

        return self.interpolate(localized, options)

    l = localize  # noqa: E741
