"""Scoped lookup into the translation store."""

from typing import Any, Mapping, Optional, Sequence, Union

from localekit.i18n.models import I18nContext
from localekit.i18n.options import prepare_options
from localekit.i18n.resolvers import LocaleResolver

Scope = Union[str, Sequence[str]]


def _join(scope: Scope, separator: str) -> str:
    if isinstance(scope, str):
        return scope
    return separator.join(str(part) for part in scope)


def _child(node: Any, segment: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(segment)
    if isinstance(node, (list, tuple)) and segment.isascii() and segment.isdigit():
        index = int(segment)
        return node[index] if index < len(node) else None
    return None


def get_full_scope(
    context: I18nContext,
    scope: Scope,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Join a scope and the ``scope`` option into one key path.

        get_full_scope(ctx, "hello", {"scope": "greetings"})
        # "greetings.hello"

    Args:
        context: Context supplying the separator.
        scope: Dotted key or sequence of segments.
        options: Options; a ``scope`` entry is used as prefix.

    Returns:
        The fully-qualified key path.
    """
    separator = context.config.separator
    full_scope = _join(scope, separator)

    prefix = (options or {}).get("scope")
    if prefix:
        full_scope = separator.join([_join(prefix, separator), full_scope])

    return full_scope


def lookup(
    context: I18nContext,
    scope: Scope,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Find the first defined value for a scope across candidate locales.

    None values in the tree count as misses, so the next locale is tried.
    Numeric segments index into lists (``"paragraphs.0"``).

    Args:
        context: Context to read the store and configuration from.
        scope: Dotted key or sequence of segments.
        options: ``locale`` overrides the current locale, ``scope`` prefixes
            the key and ``default_value`` is returned when nothing resolves.

    Returns:
        The resolved value, the default value, or None.
    """
    options = prepare_options(options)
    locales = LocaleResolver(context).resolve(options.get("locale"))
    full_scope = get_full_scope(context, scope, options)
    segments = full_scope.split(context.config.separator)

    for locale in locales:
        translations: Any = context.translations.get(locale)
        if not translations:
            continue

        for segment in segments:
            translations = _child(translations, segment)
            if translations is None:
                break

        if translations is not None:
            return translations

    return options.get("default_value")
