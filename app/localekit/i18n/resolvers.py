"""Locale resolution: which locales a lookup probes, and in what order.

By default a lookup tries the inline locale (or the current locale) and,
when fallbacks are enabled, the default locale, each followed by its base
language:

    resolver.resolve("de-DE")
    # ["de-DE", "de", "en"]

Custom rules can be registered for any locale:

    # Send Wookiee lookups to English.
    resolver.register("wk", ["en"])
"""

from typing import Callable, List, Optional, Sequence, Union

from localekit.i18n.models import I18nContext, LocaleRule
from localekit.logging import get_module_logger

logger = get_module_logger()


def default_locales(context: I18nContext, locale: Optional[str] = None) -> List[str]:
    """Built-in candidate list for a lookup.

    Args:
        context: Context supplying current/default locale and fallback flag.
        locale: Inline locale from the lookup options, if any.

    Returns:
        Ordered, duplicate-free list of locales to probe.
    """
    config = context.config
    seeds: List[str] = []

    if locale:
        seeds.append(locale)
    elif config.locale:
        seeds.append(config.locale)

    if config.fallbacks and config.default_locale:
        seeds.append(config.default_locale)

    if not seeds:
        seeds.append("en")

    # Each locale is followed by its base language, so "de-DE" yields "de" too.
    result: List[str] = []
    for seed in seeds:
        if seed not in result:
            result.append(seed)

        language = seed.split("-")[0]
        if config.fallbacks and language and language != seed and language not in result:
            result.append(language)

    return result


def _unique(locales: Sequence[str]) -> List[str]:
    result: List[str] = []
    for locale in locales:
        if locale not in result:
            result.append(locale)
    return result


class LocaleResolver:
    """Resolves the locale candidate list for a context.

    Rule selection: rule registered for the inline locale, then for the
    current locale, then the built-in default.

    Attributes:
        context: The context whose configuration and rules are used.
    """

    def __init__(self, context: I18nContext):
        self.context = context

    def register(
        self,
        locale: str,
        rule: Union[LocaleRule, Sequence[str]],
    ) -> None:
        """Register a custom candidate rule for a locale.

        Args:
            locale: Locale the rule applies to.
            rule: Callable receiving the inline locale and returning a locale
                or list of locales, or a static list of locales.

        Raises:
            TypeError: If rule is neither callable nor a sequence of strings.
        """
        if not callable(rule):
            if isinstance(rule, str) or not isinstance(rule, Sequence):
                raise TypeError(
                    f"Locale rule for {locale!r} must be callable or a list of locales"
                )
            if not all(isinstance(item, str) for item in rule):
                raise TypeError(f"Locale rule for {locale!r} must contain only strings")
            static = list(rule)
            rule = _static_rule(static)

        self.context.locale_rules[locale] = rule
        logger.debug("locale_rule_registered", locale=locale)

    def unregister(self, locale: str) -> None:
        """Remove the custom rule for a locale, if any."""
        self.context.locale_rules.pop(locale, None)

    def get_rule(self, locale: Optional[str] = None) -> Optional[LocaleRule]:
        """Return the custom rule that applies, or None for the built-in one."""
        rules = self.context.locale_rules
        if locale and locale in rules:
            return rules[locale]
        current = self.context.config.locale
        if current and current in rules:
            return rules[current]
        return None

    def resolve(self, locale: Optional[str] = None) -> List[str]:
        """Return the ordered locales to probe for a lookup.

        Args:
            locale: Inline locale from the lookup options, if any.

        Returns:
            Ordered, duplicate-free list of locale codes.
        """
        rule = self.get_rule(locale)
        if rule is None:
            return default_locales(self.context, locale)

        result = rule(locale)
        if isinstance(result, str):
            return [result]
        return _unique(result or [])

    get = resolve


def _static_rule(locales: List[str]) -> Callable[[Optional[str]], List[str]]:
    def rule(_locale: Optional[str] = None) -> List[str]:
        return list(locales)

    return rule
