"""Translator protocol (port) for error message localization.

This protocol defines what error construction needs from a localization
subsystem. Infrastructure provides the concrete adapter (CatalogTranslator).

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (CatalogTranslator)
    - Error construction uses the protocol (backend-agnostic)
"""

from typing import Protocol


class TranslatorProtocol(Protocol):
    """Protocol for looking up localized message templates.

    Lookups are synchronous against an already-initialized, read-only
    catalog. Locale fallback (active locale, then default locale) is the
    translator's responsibility, not the caller's.
    """

    @property
    def is_available(self) -> bool:
        """Whether the translation capability is initialized.

        When False, error construction skips every translation step and
        degrades to fallback text.
        """
        ...

    def lookup(self, key: str) -> str | None:
        """Return the template for a fully-qualified key.

        Args:
            key: Fully-qualified key like 'error.file.not-found'.

        Returns:
            Template string from the active locale, else from the default
            locale, else None.
        """
        ...
