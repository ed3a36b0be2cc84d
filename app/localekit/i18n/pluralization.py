"""Pluralization rules and plural form selection."""

from typing import Any, List, Mapping, Optional

from localekit.i18n.interpolation import interpolate
from localekit.i18n.lookup import Scope, lookup
from localekit.i18n.missing import missing_translation
from localekit.i18n.models import I18nContext, PluralizationRule
from localekit.i18n.options import prepare_options
from localekit.logging import get_module_logger

logger = get_module_logger()


def default_rule(count: Any) -> List[str]:
    """Detect the ``zero``, ``one`` and ``other`` categories.

    The result is a priority list: a zero count uses ``zero`` when the
    translation has it and ``other`` otherwise.
    """
    if count == 0:
        return ["zero", "other"]
    if count == 1:
        return ["one"]
    return ["other"]


class PluralizationRules:
    """Per-locale pluralization rules for a context.

    Rule selection: inline locale, then current locale, then default_rule.
    """

    def __init__(self, context: I18nContext):
        self.context = context

    def register(self, locale: str, rule: PluralizationRule) -> None:
        """Register the pluralization rule for a locale.

        Raises:
            TypeError: If rule is not callable.
        """
        if not callable(rule):
            raise TypeError(f"Pluralization rule for {locale!r} must be callable")
        self.context.pluralization_rules[locale] = rule
        logger.debug("pluralization_rule_registered", locale=locale)

    def unregister(self, locale: str) -> None:
        self.context.pluralization_rules.pop(locale, None)

    def get(self, locale: Optional[str] = None) -> PluralizationRule:
        rules = self.context.pluralization_rules
        if locale and locale in rules:
            return rules[locale]
        current = self.context.config.locale
        if current and current in rules:
            return rules[current]
        return default_rule


def pluralize(
    context: I18nContext,
    count: Any,
    scope: Any,
    options: Optional[Mapping[str, Any]] = None,
    *,
    source_scope: Optional[Scope] = None,
) -> str:
    """Pick the plural form for count and interpolate it.

    Args:
        context: Context to resolve scopes and rules with.
        count: Number deciding the category; also injected as ``count``.
        scope: Key of a plural subtree, or the subtree itself.
        options: Placeholder values and lookup options.
        source_scope: Key the subtree came from, used in missing markers.

    Returns:
        The interpolated plural form, or a missing-translation marker when
        the subtree or every candidate branch is absent.
    """
    options = prepare_options(options)

    if isinstance(scope, Mapping):
        translations = scope
    else:
        source_scope = scope
        translations = lookup(context, scope, options)

    if not translations or not isinstance(translations, Mapping):
        return missing_translation(context, source_scope or "", options)

    rule = PluralizationRules(context).get(options.get("locale"))
    keys = rule(count)

    message = None
    for key in keys:
        if translations.get(key) is not None:
            message = translations[key]
            break

    if message is None:
        branch = keys[-1] if keys else "other"
        if source_scope:
            branch = context.config.separator.join([_scope_string(context, source_scope), branch])
        return missing_translation(context, branch, options)

    options["count"] = _count_string(count)
    return interpolate(context, message, options)


def _scope_string(context: I18nContext, scope: Scope) -> str:
    if isinstance(scope, str):
        return scope
    return context.config.separator.join(str(part) for part in scope)


def _count_string(count: Any) -> str:
    """Render count for interpolation; whole floats drop the fraction."""
    if isinstance(count, float) and count.is_integer():
        return str(int(count))
    return str(count)
