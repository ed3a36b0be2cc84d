"""Rendering of missing translations."""

import re
from typing import Any, Mapping, Optional

from localekit.i18n.lookup import Scope, get_full_scope
from localekit.i18n.models import I18nContext, MissingBehaviour
from localekit.logging import get_module_logger

logger = get_module_logger()

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def guess(key: str, separator: str = ".", prefix: str = "") -> str:
    """Turn the last segment of a key into readable text.

        guess("user.firstName")    # "first name"
        guess("user.last_name")    # "last name"
    """
    segment = key.split(separator)[-1]
    segment = segment.replace("_", " ")
    segment = _CAMEL_BOUNDARY.sub(lambda m: f"{m.group(1)} {m.group(2).lower()}", segment)
    return f"{prefix}{segment}"


def missing_translation(
    context: I18nContext,
    scope: Scope,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Return the marker shown in place of a missing translation.

    Args:
        context: Context supplying the behaviour, separator and locale.
        scope: Key that failed to resolve.
        options: Lookup options (``scope`` prefix is honoured).

    Returns:
        ``[missing "<locale>.<scope>" translation]`` in message mode, or a
        guessed string in guess mode.
    """
    config = context.config
    full_scope = get_full_scope(context, scope, options)

    logger.debug(
        "translation_missing",
        scope=full_scope,
        locale=config.current_locale(),
        behaviour=config.missing_behaviour.value,
    )

    if config.missing_behaviour == MissingBehaviour.GUESS:
        return guess(full_scope, config.separator, config.missing_translation_prefix)

    full_scope_with_locale = config.separator.join([config.current_locale(), full_scope])
    return f'[missing "{full_scope_with_locale}" translation]'
