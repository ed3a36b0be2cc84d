"""Factory functions for creating translators.

Builds a Translator from settings, an optional translations directory and
the host's preferred locales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from localekit.configuration import Settings, get_settings
from localekit.i18n.loader import load_translations
from localekit.i18n.models import DEFAULT_LOCALE, MissingBehaviour, RuntimeConfig
from localekit.i18n.translator import Translator
from localekit.logging import get_module_logger

logger = get_module_logger()


def initial_locale(
    preferred_locales: Optional[Sequence[str]] = None,
    configured_locale: Optional[str] = None,
) -> str:
    """Pick the startup locale.

    The first of the host's preferred locales wins; without any, the
    configured locale is used, then "en".
    """
    if preferred_locales:
        return preferred_locales[0]
    return configured_locale or DEFAULT_LOCALE


def create_translator(
    translations: Optional[Mapping[str, Mapping[str, Any]]] = None,
    translations_dir: Optional[Path] = None,
    preferred_locales: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations: In-memory store. Takes precedence over translations_dir.
        translations_dir: Directory of YAML files (default: I18N_TRANSLATIONS_DIR).
        preferred_locales: Host locale preferences; only the first is used.
        settings: Settings to configure from (default: process-wide settings).

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        # Host passes device languages once at startup
        translator = create_translator(
            translations={"en": {...}, "de": {...}},
            preferred_locales=["de-DE", "en-US"],
        )
    """
    settings = settings or get_settings()
    i18n = settings.i18n

    config = RuntimeConfig(
        locale=initial_locale(preferred_locales, i18n.locale),
        default_locale=i18n.default_locale,
        separator=i18n.separator,
        fallbacks=i18n.fallbacks,
        missing_behaviour=MissingBehaviour.from_string(i18n.missing_behaviour),
        missing_translation_prefix=i18n.missing_translation_prefix,
    )

    if translations is None:
        directory = translations_dir or i18n.translations_dir
        translations = load_translations(Path(directory) if directory else None)

    translator = Translator(translations=translations, config=config)
    logger.info(
        "translator_created",
        locale=config.locale,
        fallbacks=config.fallbacks,
        locale_count=len(translator.translations),
    )
    return translator


@lru_cache
def get_translator() -> Translator:
    """Get the process-wide translator singleton.

    Configured from settings on first use. Call
    ``get_translator.cache_clear()`` to rebuild it.
    """
    return create_translator()
