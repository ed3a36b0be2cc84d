"""Translation loading interface and YAML implementation.

Loaders build the in-memory store (locale -> nested tree) a Translator
consumes. The engine itself never reads files.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from localekit.i18n.options import deep_merge
from localekit.logging import get_module_logger

logger = get_module_logger()

LOCALE_CODE = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*$")


class TranslationLoader(ABC):
    """Abstract base for translation loaders."""

    @abstractmethod
    def load(self, locale: str) -> Dict[str, Any]:
        """Load the translation tree for a locale.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load the trees of every available locale."""


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Expects files named ``<locale>.yml`` or ``<domain>.<locale>.yml``. All
    files of a locale are deep-merged in name order into one tree.

    Attributes:
        translations_dir: Directory containing YAML files.
        cache: Loaded trees by locale when caching is enabled.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        """Initialize YAML translation loader.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, Any]] = {}

        if not self.translations_dir.exists():
            raise ValueError(f"Translations directory not found: {self.translations_dir}")

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files_for(self, locale: str):
        files = list(self.translations_dir.glob(f"{locale}.yml"))
        files.extend(self.translations_dir.glob(f"*.{locale}.yml"))
        return sorted(set(files))

    def load(self, locale: str) -> Dict[str, Any]:
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        yaml_files = self._files_for(locale)
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        tree: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning("invalid_yaml_format", file=str(yaml_file), expected="dict")
                continue
            deep_merge(tree, data)

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
            key_count=len(tree),
        )

        if self.use_cache:
            self.cache[locale] = tree

        return tree

    def available_locales(self) -> list:
        """Detect locales from the file names in translations_dir."""
        locales = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            locale = yaml_file.stem.split(".")[-1]
            if LOCALE_CODE.match(locale):
                locales.add(locale)
        return sorted(locales)

    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load every locale found in translations_dir.

        Raises:
            ValueError: If no translation files are found at all.
        """
        locales = self.available_locales()
        if not locales:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {locale: self.load(locale) for locale in locales}

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


def load_translations(translations_dir: Optional[Path]) -> Dict[str, Dict[str, Any]]:
    """Load a store from a directory, or return an empty one for None."""
    if translations_dir is None:
        return {}
    return YAMLTranslationLoader(translations_dir, use_cache=False).load_all()
