"""Unit tests for container factory functions.

Tests cover:
- Logger adapter configuration per environment
- Singleton behavior of cached factories
- Default ErrorContext wiring (translator, document root, switches)
- Installing translation catalogs

Architecture:
- Settings patched per test
- Container caches cleared by the autouse conftest fixture
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from errkit.core.config import Settings
from errkit.core.container import (
    configure_translations,
    get_environment,
    get_error_context,
    get_logger,
    get_template_engine,
    get_translator,
)
from errkit.core.errors import NotFoundError, StructuredError
from errkit.infrastructure.environment import EnvAdapter
from errkit.infrastructure.i18n import CatalogTranslator
from errkit.infrastructure.templating import PlaceholderEngine


@pytest.fixture
def installed_catalogs():
    """Install catalogs for the test and remove them afterwards."""
    with patch("errkit.core.container.get_logger"):
        configure_translations(
            {
                "en": {"error": {"notFound": "Nothing here"}},
                "de": {"error": {"notFound": "Nichts hier"}},
            }
        )
    yield
    with patch("errkit.core.container.get_logger"):
        configure_translations({})


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() adapter configuration."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            ("development", False),
            ("testing", True),
            ("ci", True),
            ("production", True),
        ],
    )
    def test_renderer_per_environment(self, environment, use_json):
        """Test JSON output everywhere except development."""
        with patch(
            "errkit.core.container.get_settings",
            return_value=Settings(environment=environment),
        ):
            with patch(
                "errkit.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                mock_console.return_value = MagicMock()

                logger = get_logger()

                mock_console.assert_called_once_with(use_json=use_json, level="INFO")
                assert logger is mock_console.return_value

    def test_debug_switch_sets_level(self):
        """Test debug settings produce a DEBUG level logger."""
        with patch(
            "errkit.core.container.get_settings",
            return_value=Settings(debug=True),
        ):
            with patch(
                "errkit.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                get_logger()

                mock_console.assert_called_once_with(use_json=False, level="DEBUG")

    def test_returns_singleton(self):
        """Test repeated calls return the same instance."""
        assert get_logger() is get_logger()


@pytest.mark.unit
class TestSingletonFactories:
    """Test adapter factories."""

    def test_template_engine(self):
        """Test a cached PlaceholderEngine is returned."""
        engine = get_template_engine()

        assert isinstance(engine, PlaceholderEngine)
        assert get_template_engine() is engine

    def test_environment(self):
        """Test a cached EnvAdapter is returned."""
        environment = get_environment()

        assert isinstance(environment, EnvAdapter)
        assert get_environment() is environment

    def test_translator_without_catalogs_is_unavailable(self):
        """Test no installed catalogs means no localization."""
        translator = get_translator()

        assert isinstance(translator, CatalogTranslator)
        assert translator.is_available is False

    def test_translator_uses_settings_locales(self, installed_catalogs):
        """Test translator is bound to the configured locale."""
        with patch(
            "errkit.core.container.get_settings",
            return_value=Settings(locale="de"),
        ):
            translator = get_translator()

        assert translator.lookup("error.notFound") == "Nichts hier"


@pytest.mark.unit
class TestGetErrorContext:
    """Test default ErrorContext wiring."""

    def test_wires_singletons(self):
        """Test the context is built from the container's singletons."""
        context = get_error_context()

        assert context.template_engine is get_template_engine()
        assert context.translator is get_translator()
        assert context.logger is get_logger()
        assert get_error_context() is context

    def test_document_root_from_settings(self):
        """Test settings document root wins over the environment."""
        with patch.dict(os.environ, {"DOCUMENT_ROOT": "/from/env"}):
            with patch(
                "errkit.core.container.get_settings",
                return_value=Settings(document_root="/from/settings"),
            ):
                context = get_error_context()

        assert context.document_root == "/from/settings"

    def test_document_root_from_environment(self):
        """Test DOCUMENT_ROOT is used when settings carry none."""
        with patch.dict(os.environ, {"DOCUMENT_ROOT": "/from/env"}):
            with patch(
                "errkit.core.container.get_settings",
                return_value=Settings(document_root=None),
            ):
                context = get_error_context()

        assert context.document_root == "/from/env"

    def test_document_root_captured_until_cache_cleared(self):
        """Test the default context keeps the root it was built with."""
        settings = Settings(document_root=None)
        with patch("errkit.core.container.get_settings", return_value=settings):
            with patch.dict(os.environ, {"DOCUMENT_ROOT": "/srv/first"}):
                first = get_error_context()
            with patch.dict(os.environ, {"DOCUMENT_ROOT": "/srv/second"}):
                cached = get_error_context()
                get_error_context.cache_clear()
                rebuilt = get_error_context()

        assert cached is first
        assert cached.document_root == "/srv/first"
        assert rebuilt.document_root == "/srv/second"

    def test_translate_switch_from_settings(self, installed_catalogs):
        """Test translate_errors=False disables localization."""
        with patch(
            "errkit.core.container.get_settings",
            return_value=Settings(translate_errors=False),
        ):
            context = get_error_context()

        assert context.localization_available is False


@pytest.mark.integration
class TestDefaultContextErrors:
    """Test errors built without an explicit context."""

    def test_fallback_without_catalogs(self):
        """Test errors degrade to built-in text with no catalogs."""
        error = NotFoundError()

        assert error.message == "Not found"
        assert error.is_translated is False

    def test_translation_after_configure(self, installed_catalogs):
        """Test installed catalogs are used by subsequently built errors."""
        error = NotFoundError()

        assert error.message == "Nothing here"
        assert error.is_translated is True

    def test_configure_replaces_catalogs(self, installed_catalogs):
        """Test configuring again replaces earlier catalogs."""
        with patch("errkit.core.container.get_logger"):
            configure_translations({"en": {"error.general": "Replaced"}})

        assert StructuredError().message == "Replaced"
        assert NotFoundError().message == "Not found"

    def test_configure_logs_locales(self, installed_catalogs):
        """Test installing catalogs is logged with the locale list."""
        with patch("errkit.core.container.get_logger") as mock_get_logger:
            configure_translations({"fr": {}, "en": {}})

        mock_get_logger.return_value.info.assert_called_once_with(
            "Translations configured", locales=["en", "fr"]
        )
