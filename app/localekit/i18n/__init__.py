"""i18n engine - translation resolution and localization.

Resolves dotted keys against per-locale translation trees with locale
fallbacks, pluralization, placeholder interpolation and number/date
formatting.

Main components:
- models: RuntimeConfig, I18nContext, MissingBehaviour, node types
- options: prepare_options option merging
- resolvers: LocaleResolver candidate locale lists
- lookup: scoped lookup into the store
- pluralization: PluralizationRules and pluralize
- interpolation: Interpolator placeholder substitution
- translator: Translator public API
- numbers / dates: formatting helpers
- loader / factory: building translators from YAML and settings
"""

from localekit.i18n.dates import INVALID_DATE, InvalidDate
from localekit.i18n.factory import create_translator, get_translator
from localekit.i18n.interpolation import Interpolator
from localekit.i18n.loader import TranslationLoader, YAMLTranslationLoader
from localekit.i18n.models import (
    I18nContext,
    Leaf,
    MissingBehaviour,
    Number,
    PluralForms,
    Raw,
    RuntimeConfig,
    Subtree,
    classify_node,
)
from localekit.i18n.options import prepare_options
from localekit.i18n.pluralization import PluralizationRules, default_rule
from localekit.i18n.resolvers import LocaleResolver
from localekit.i18n.translator import Translator

__all__ = [
    "I18nContext",
    "RuntimeConfig",
    "MissingBehaviour",
    "Leaf",
    "Number",
    "Subtree",
    "PluralForms",
    "Raw",
    "classify_node",
    "prepare_options",
    "LocaleResolver",
    "PluralizationRules",
    "default_rule",
    "Interpolator",
    "Translator",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "create_translator",
    "get_translator",
    "INVALID_DATE",
    "InvalidDate",
]
