"""Translate orchestration: fallback candidates, dispatch on node type."""

from typing import Any, Dict, List, Mapping, Optional

from localekit.i18n.interpolation import interpolate
from localekit.i18n.lookup import Scope, lookup
from localekit.i18n.missing import missing_translation
from localekit.i18n.models import (
    I18nContext,
    Leaf,
    PluralForms,
    Subtree,
    classify_node,
)
from localekit.i18n.options import prepare_options
from localekit.i18n.pluralization import pluralize


def create_translation_options(scope: Scope, options: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Build the ordered list of candidates tried by translate.

    ``defaults`` holds further ``{"scope": ...}`` or ``{"message": ...}``
    entries; a bare string is a scope and anything else is ignored.
    ``default_value`` is appended as a message and removed from
    options so the lookups don't return it themselves.

    Args:
        scope: Requested key.
        options: Working option bag; ``default_value`` is popped from it.

    Returns:
        Candidate dicts in the order they are tried.
    """
    translation_options: List[Dict[str, Any]] = [{"scope": scope}]

    defaults = options.get("defaults")
    if defaults is not None:
        if not isinstance(defaults, (list, tuple)):
            defaults = [defaults]
        for default in defaults:
            if isinstance(default, str):
                translation_options.append({"scope": default})
            elif isinstance(default, Mapping):
                translation_options.append(dict(default))

    default_value = options.pop("default_value", None)
    if default_value is not None:
        translation_options.append({"message": default_value})

    return translation_options


def translate(
    context: I18nContext,
    scope: Scope,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Translate a scope with the given options.

    Args:
        context: Context to translate in.
        scope: Dotted key or sequence of segments.
        options: Placeholder values plus ``locale``, ``scope``, ``count``,
            ``defaults`` and ``default_value``.

    Returns:
        The interpolated string, the selected plural form, the raw value for
        non-string translations, or a missing-translation marker.
    """
    options = prepare_options(options)
    translation_options = create_translation_options(scope, options)

    translation = None
    for translation_option in translation_options:
        if translation_option.get("scope") is not None:
            translation = lookup(context, translation_option["scope"], options)
        elif translation_option.get("message") is not None:
            translation = translation_option["message"]
        else:
            translation = None

        if translation is not None:
            break
    else:
        return missing_translation(context, scope, options)

    node = classify_node(translation)

    if isinstance(node, Leaf):
        return interpolate(context, node.value, options)
    if isinstance(node, (Subtree, PluralForms)) and options.get("count") is not None:
        return pluralize(context, options["count"], node.value, options, source_scope=scope)

    return translation
