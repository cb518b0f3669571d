"""Resolution context for error construction.

Bundles every process-wide collaborator that error construction consults,
so construction is deterministic for a given context and trivially
testable with fakes.

Usage:
    from errkit.core.errors import ErrorContext, NotFoundError
    from errkit.infrastructure.templating import PlaceholderEngine

    context = ErrorContext(template_engine=PlaceholderEngine())
    error = NotFoundError(context=context)
"""

from dataclasses import dataclass

from errkit.domain.protocols import (
    LoggerProtocol,
    TemplateEngineProtocol,
    TranslatorProtocol,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorContext:
    """Collaborators and configuration used to build errors.

    Attributes:
        template_engine: Renders placeholders into messages.
        translator: Localization subsystem, None when absent.
        translate: Master switch; False disables every translation step.
        document_root: Prefix stripped from source file paths.
        logger: Receives resolution diagnostics at DEBUG level.
    """

    template_engine: TemplateEngineProtocol
    translator: TranslatorProtocol | None = None
    translate: bool = True
    document_root: str | None = None
    logger: LoggerProtocol | None = None

    @property
    def localization_available(self) -> bool:
        """Whether translation lookups can be attempted."""
        return (
            self.translate
            and self.translator is not None
            and self.translator.is_available
        )
