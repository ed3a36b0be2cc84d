"""localekit - runtime translation resolution.

Module-level helpers delegate to the process-wide translator returned by
get_translator(); create your own Translator for independent contexts.

Example:
    from localekit import get_translator, t

    get_translator().translations = {"en": {"greeting": "Hello {{name}}"}}
    t("greeting", name="World")
    # "Hello World"
"""

from typing import Any, Mapping, Optional

from localekit.i18n import Translator, create_translator, get_translator


def translate(scope, options: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> Any:
    return get_translator().translate(scope, options, **kwargs)


def localize(scope: str, value: Any, options: Optional[Mapping[str, Any]] = None) -> str:
    return get_translator().localize(scope, value, options)


def pluralize(count: Any, scope: Any, options: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> str:
    return get_translator().pluralize(count, scope, options, **kwargs)


t = translate
l = localize  # noqa: E741
p = pluralize

__all__ = [
    "Translator",
    "create_translator",
    "get_translator",
    "translate",
    "localize",
    "pluralize",
    "t",
    "l",
    "p",
]
