"""Container module - Centralized dependency injection.

Application-scoped singletons for the error subsystem:
- Logging (console, structlog)
- Translation (in-memory catalogs)
- Templating (placeholder engine)
- Server environment (document root)
- Default ErrorContext used when errors are built without one

Adapter selection lives here (composition root); core error code only sees
protocols.

Usage:
    from errkit.core.container import configure_translations, get_error_context

    configure_translations({"en": {"error.notFound": "Not found"}})
    context = get_error_context()
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from errkit.core.config import get_settings

if TYPE_CHECKING:
    from errkit.core.errors.error_context import ErrorContext
    from errkit.domain.protocols.environment_protocol import EnvironmentProtocol
    from errkit.domain.protocols.logger_protocol import LoggerProtocol
    from errkit.domain.protocols.template_engine_protocol import (
        TemplateEngineProtocol,
    )
    from errkit.domain.protocols.translator_protocol import TranslatorProtocol


_translation_catalogs: dict[str, Mapping[str, Any]] = {}


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from errkit.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    return ConsoleAdapter(
        use_json=env != "development",
        level=settings.effective_log_level,
    )


@lru_cache()
def get_translator() -> "TranslatorProtocol":
    """Return the translator singleton.

    Built from the catalogs installed with configure_translations(). With no
    catalogs installed the translator reports itself unavailable, and errors
    resolve to fallback text.

    Returns:
        TranslatorProtocol: CatalogTranslator for the configured locales.
    """
    from errkit.infrastructure.i18n.catalog_translator import CatalogTranslator

    settings = get_settings()
    return CatalogTranslator(
        _translation_catalogs,
        locale=settings.locale,
        default_locale=settings.default_locale,
    )


@lru_cache()
def get_template_engine() -> "TemplateEngineProtocol":
    """Return the template engine singleton.

    Returns:
        TemplateEngineProtocol: PlaceholderEngine for '{{ name }}' templates.
    """
    from errkit.infrastructure.templating.placeholder_engine import (
        PlaceholderEngine,
    )

    return PlaceholderEngine()


@lru_cache()
def get_environment() -> "EnvironmentProtocol":
    """Return the server environment singleton.

    Returns:
        EnvironmentProtocol: EnvAdapter reading DOCUMENT_ROOT.
    """
    from errkit.infrastructure.environment.env_adapter import EnvAdapter

    return EnvAdapter()


@lru_cache()
def get_error_context() -> "ErrorContext":
    """Return the default context used by errors built without one.

    The document root comes from settings when configured, otherwise from
    the server environment, and is captured when the context is first built.

    Returns:
        ErrorContext: Context wired with the container's singletons.
    """
    from errkit.core.errors.error_context import ErrorContext

    settings = get_settings()
    return ErrorContext(
        template_engine=get_template_engine(),
        translator=get_translator(),
        translate=settings.translate_errors,
        document_root=settings.document_root or get_environment().get_document_root(),
        logger=get_logger(),
    )


def configure_translations(catalogs: Mapping[str, Mapping[str, Any]]) -> None:
    """Install translation catalogs for the default context.

    Replaces any previously installed catalogs and drops the cached
    translator and context so the next error picks them up.

    Args:
        catalogs: Message catalogs keyed by locale code.
    """
    _translation_catalogs.clear()
    _translation_catalogs.update(catalogs)
    get_translator.cache_clear()
    get_error_context.cache_clear()
    get_logger().info("Translations configured", locales=sorted(catalogs))
