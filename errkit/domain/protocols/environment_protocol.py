"""Environment protocol (port) for process/request context access.

Only the document root is needed: it is stripped from source file paths
before errors are shown to anyone outside the process.
"""

from typing import Protocol


class EnvironmentProtocol(Protocol):
    """Protocol for reading server environment values."""

    def get_document_root(self) -> str | None:
        """Return the document root, or None when unknown or empty."""
        ...
