"""Feature-level fixtures for i18n engine tests.

Provides sample translation stores, translators and YAML directories.
"""

import pytest
import yaml

from localekit.i18n import Translator


@pytest.fixture
def translations():
    """Sample store covering strings, plurals, numbers and dates."""
    return {
        "en": {
            "hello": "Hello World!",
            "greetings": {
                "stranger": "Hello stranger!",
                "name": "Hello {{name}}!",
            },
            "profile": {"details": "%{name} is %{age}-years old"},
            "inbox": {
                "one": "You have {{count}} message",
                "other": "You have {{count}} messages",
                "zero": "You have no messages",
            },
            "unread": {
                "one": "You have 1 new message ({{unread}} unread)",
                "other": "You have {{count}} new messages ({{unread}} unread)",
            },
            "null_key": None,
            "age": 42,
            "paragraphs": ["First", "Second"],
            "number": {
                "format": {"precision": 2, "separator": ".", "delimiter": ","},
                "currency": {
                    "format": {"unit": "$", "format": "%u%n", "precision": 2},
                },
                "percentage": {"format": {"precision": 1}},
            },
            "date": {
                "formats": {
                    "default": "%Y-%m-%d",
                    "short": "%b %d",
                    "long": "%B %d, %Y",
                },
            },
            "time": {
                "formats": {
                    "default": "%a, %d %b %Y %H:%M:%S %z",
                    "short": "%d %b %H:%M",
                },
                "am": "am",
                "pm": "pm",
            },
        },
        "de": {
            "hello": "Hallo Welt!",
            "only_de": "Nur Deutsch",
        },
        "de-DE": {
            "regional": "Regional",
        },
        "pt-BR": {
            "hello": "Olá Mundo!",
            "date": {
                "formats": {"default": "%d/%m/%Y", "short": "%d de %B"},
                "abbr_day_names": ["Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb"],
                "day_names": ["Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado"],
                "abbr_month_names": [None, "Jan", "Fev", "Mar", "Abr", "Mai", "Jun",
                                     "Jul", "Ago", "Set", "Out", "Nov", "Dez"],
                "month_names": [None, "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
                                "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro"],
            },
            "number": {
                "currency": {
                    "format": {"delimiter": ".", "separator": ",", "unit": "R$", "format": "%u %n"},
                },
            },
        },
    }


@pytest.fixture
def translator(translations):
    """Translator over the sample store, locale "en", fallbacks off."""
    return Translator(translations=translations)


@pytest.fixture
def empty_translator():
    """Translator with an empty store."""
    return Translator()


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Directory with YAML files:

    - en.yml
    - billing.en.yml
    - fr-FR.yml
    """
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"greetings": {"hello": "Hello {{name}}"}}, f)

    with open(tmp_path / "billing.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"greetings": {"bye": "Goodbye"}, "billing": {"due": "Due {{date}}"}},
            f,
        )

    with open(tmp_path / "fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.dump({"greetings": {"hello": "Bonjour {{name}}"}}, f, allow_unicode=True)

    return tmp_path
