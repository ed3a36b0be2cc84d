"""Placeholder interpolation for translated messages."""

from typing import Any, Mapping, Optional, Pattern

from localekit.i18n.models import I18nContext
from localekit.i18n.options import prepare_options


def missing_placeholder(placeholder: str, message: Optional[str] = None) -> str:
    """Marker for a placeholder with no value in the options."""
    return f"[missing {placeholder} value]"


def null_placeholder(placeholder: str, message: Optional[str] = None) -> str:
    """Marker for a placeholder whose option is explicitly None."""
    return missing_placeholder(placeholder, message)


class Interpolator:
    """Replaces ``{{name}}`` and ``%{name}`` placeholders with option values.

    Replacement is a single left-to-right pass building a new string, so
    values containing ``$`` or backslashes are inserted literally.

    Attributes:
        pattern: Compiled placeholder pattern; group 1 is the name.
    """

    def __init__(self, pattern: Pattern[str]):
        self.pattern = pattern

    def interpolate(self, message: Any, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Substitute every placeholder in message.

        Args:
            message: Template string. Non-strings are returned unchanged.
            options: Placeholder values by name.

        Returns:
            The interpolated message.
        """
        if not isinstance(message, str):
            return message

        options = prepare_options(options)

        def replace(match) -> str:
            placeholder = match.group(0)
            name = match.group(1)

            if options.get(name) is not None:
                return str(options[name])
            if name in options:
                return null_placeholder(placeholder, message)
            return missing_placeholder(placeholder, message)

        return self.pattern.sub(replace, message)


def interpolate(
    context: I18nContext,
    message: Any,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Interpolate message using the context's placeholder pattern."""
    return Interpolator(context.config.placeholder).interpolate(message, options)
