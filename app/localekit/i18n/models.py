"""Translation models for the i18n engine.

Defines the runtime configuration, the per-translator context and the
node types a lookup can resolve to.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from numbers import Number as _Number
from typing import Any, Callable, Dict, List, Mapping, Optional, Pattern, Sequence, Union

# Accepts `{{placeholder}}` and `%{placeholder}`; group 1 is the name.
DEFAULT_PLACEHOLDER: Pattern[str] = re.compile(r"(?:\{\{|%\{)(.*?)(?:\}\}?)")

DEFAULT_LOCALE = "en"
DEFAULT_SEPARATOR = "."

PLURAL_CATEGORIES = frozenset({"zero", "one", "two", "few", "many", "other"})

PluralizationRule = Callable[[Any], List[str]]
LocaleRule = Callable[[Optional[str]], Union[str, Sequence[str]]]


class MissingBehaviour(str, Enum):
    """How a missing translation is rendered."""

    MESSAGE = "message"
    GUESS = "guess"

    @classmethod
    def from_string(cls, value: Union[str, "MissingBehaviour"]) -> "MissingBehaviour":
        """Convert string to MissingBehaviour enum.

        Args:
            value: "message" or "guess" (case-insensitive).

        Returns:
            Matching MissingBehaviour value.

        Raises:
            ValueError: If the behaviour is not supported.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise ValueError(f"Unsupported missing behaviour: {value}") from e


@dataclass
class RuntimeConfig:
    """Runtime configuration read by every lookup.

    Attributes:
        locale: Current locale, or None to use default_locale.
        default_locale: Locale probed when fallbacks are enabled.
        separator: Key path delimiter.
        placeholder: Compiled pattern whose first group is the placeholder name.
        fallbacks: Probe the default locale and base languages on a miss.
        missing_behaviour: Rendering of missing translations.
        missing_translation_prefix: Prefix for guessed strings.
    """

    locale: Optional[str] = DEFAULT_LOCALE
    default_locale: str = DEFAULT_LOCALE
    separator: str = DEFAULT_SEPARATOR
    placeholder: Pattern[str] = DEFAULT_PLACEHOLDER
    fallbacks: bool = False
    missing_behaviour: MissingBehaviour = MissingBehaviour.MESSAGE
    missing_translation_prefix: str = ""

    def current_locale(self) -> str:
        """Return the current locale, or the default locale if none is set."""
        return self.locale or self.default_locale


@dataclass
class I18nContext:
    """Everything a lookup reads: configuration, store and rule registries.

    One context per Translator; independent contexts never share state.

    Attributes:
        config: Runtime configuration.
        translations: Store mapping locale -> nested translation tree.
        locale_rules: Custom locale candidate rules keyed by locale.
        pluralization_rules: Custom pluralization rules keyed by locale.
    """

    config: RuntimeConfig = field(default_factory=RuntimeConfig)
    translations: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    locale_rules: Dict[str, LocaleRule] = field(default_factory=dict)
    pluralization_rules: Dict[str, PluralizationRule] = field(default_factory=dict)


@dataclass(frozen=True)
class Leaf:
    """A string translation."""

    value: str


@dataclass(frozen=True)
class Number:
    """A numeric translation, returned as is."""

    value: Any


@dataclass(frozen=True)
class Subtree:
    """A nested mapping of further translations."""

    value: Mapping[str, Any]


@dataclass(frozen=True)
class PluralForms:
    """A mapping from pluralization category to message."""

    value: Mapping[str, Any]


@dataclass(frozen=True)
class Raw:
    """Any other value (lists, booleans, objects)."""

    value: Any


TranslationNode = Union[Leaf, Number, Subtree, PluralForms, Raw]


def is_set(value: Any) -> bool:
    """Return True unless value is None."""
    return value is not None


def classify_node(value: Any) -> Optional[TranslationNode]:
    """Wrap a raw lookup result in its node variant.

    Args:
        value: Value returned by a lookup.

    Returns:
        The matching node, or None if value is None.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return Leaf(value)
    if isinstance(value, bool):
        return Raw(value)
    if isinstance(value, _Number):
        return Number(value)
    if isinstance(value, Mapping):
        if value and all(key in PLURAL_CATEGORIES for key in value):
            return PluralForms(value)
        return Subtree(value)
    return Raw(value)
