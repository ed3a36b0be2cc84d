"""Translation engine settings."""

from typing import Optional

from pydantic import Field, field_validator

from localekit.configuration.base import LocaleKitSettings

MISSING_BEHAVIOURS = ("message", "guess")


class I18nSettings(LocaleKitSettings):
    """Startup configuration for the translation engine.

    Environment Variables:
        I18N_LOCALE: Current locale at startup (default: unset, uses the
            host's preferred locales or "en")
        I18N_DEFAULT_LOCALE: Locale probed when fallbacks are enabled (default: en)
        I18N_SEPARATOR: Translation key separator (default: ".")
        I18N_FALLBACKS: Probe the default locale and base languages (default: False)
        I18N_MISSING_BEHAVIOUR: "message" or "guess" (default: message)
        I18N_MISSING_TRANSLATION_PREFIX: Prefix for guessed strings (default: "")
        I18N_TRANSLATIONS_DIR: Directory with <locale>.yml files (optional)

    Example:
        ```python
        from localekit.configuration import get_settings

        settings = get_settings()

        if settings.i18n.fallbacks:
            default = settings.i18n.default_locale
        ```
    """

    locale: Optional[str] = Field(default=None, alias="I18N_LOCALE")
    default_locale: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    separator: str = Field(default=".", alias="I18N_SEPARATOR")
    fallbacks: bool = Field(default=False, alias="I18N_FALLBACKS")
    missing_behaviour: str = Field(
        default="message",
        alias="I18N_MISSING_BEHAVIOUR",
        description="How missing translations are rendered: 'message' or 'guess'",
    )
    missing_translation_prefix: str = Field(
        default="", alias="I18N_MISSING_TRANSLATION_PREFIX"
    )
    translations_dir: Optional[str] = Field(default=None, alias="I18N_TRANSLATIONS_DIR")

    @field_validator("missing_behaviour")
    @classmethod
    def validate_missing_behaviour(cls, v: str) -> str:
        """Validate the missing_behaviour field."""
        value = v.strip().lower()
        if value not in MISSING_BEHAVIOURS:
            raise ValueError(
                f"missing_behaviour must be one of {', '.join(MISSING_BEHAVIOURS)}: {v}"
            )
        return value

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Reject an empty separator."""
        if not v:
            raise ValueError("separator must not be empty")
        return v
