"""Shared fixtures for the localekit test suite."""

import pytest

from localekit.configuration import get_settings
from localekit.i18n import get_translator


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop the cached settings and translator around every test."""
    get_settings.cache_clear()
    get_translator.cache_clear()
    yield
    get_settings.cache_clear()
    get_translator.cache_clear()
