"""Pytest configuration and shared fixtures.

Fixtures build explicit ErrorContext instances so error construction is
deterministic and never touches the container's process-wide defaults.
Container caches are cleared around every test for isolation.
"""

import pytest

from errkit.core.config import get_settings
from errkit.core.container import (
    get_environment,
    get_error_context,
    get_logger,
    get_template_engine,
    get_translator,
)
from errkit.core.errors import ErrorContext
from errkit.infrastructure.i18n import CatalogTranslator
from errkit.infrastructure.templating import PlaceholderEngine

CATALOGS = {
    "en": {
        "error.general": "Something went wrong",
        "error.notFound": "The requested item was not found",
        "error.file.not-found": "File {{ filename }} not found",
        "error.page.notFound": 'The page "{{ slug }}" cannot be found',
    },
    "de": {
        "error.file.not-found": "Datei {{ filename }} nicht gefunden",
    },
}


@pytest.fixture
def template_engine():
    """Placeholder engine with default delimiters."""
    return PlaceholderEngine()


@pytest.fixture
def translator():
    """English translator over the shared test catalogs."""
    return CatalogTranslator(CATALOGS, locale="en", default_locale="en")


@pytest.fixture
def localized_context(template_engine, translator):
    """Context with an available translator."""
    return ErrorContext(template_engine=template_engine, translator=translator)


@pytest.fixture
def unlocalized_context(template_engine):
    """Context without a localization subsystem."""
    return ErrorContext(template_engine=template_engine, translator=None)


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Drop cached settings and singletons before and after each test."""
    caches = (
        get_settings,
        get_logger,
        get_translator,
        get_template_engine,
        get_environment,
        get_error_context,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Tests wiring real adapters through the container"
    )
