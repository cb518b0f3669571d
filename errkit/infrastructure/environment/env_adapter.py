"""Environment variables adapter for server context values.

Implements EnvironmentProtocol using the process environment.

File: env_adapter.py → class EnvAdapter (PEP 8 naming)
"""

import os


class EnvAdapter:
    """Server environment read from process environment variables.

    Each call reads the process environment. The container's default
    ErrorContext stores the value once when it is first built; clear
    get_error_context's cache to pick up a document root exported later.

    Args:
        document_root_variable: Name of the variable holding the document root.
    """

    def __init__(self, *, document_root_variable: str = "DOCUMENT_ROOT") -> None:
        self._document_root_variable = document_root_variable

    def get_document_root(self) -> str | None:
        """Get the document root from the environment.

        Returns:
            The variable's value, or None when it is unset or blank.

        Example:
            >>> adapter = EnvAdapter()
            >>> # With DOCUMENT_ROOT=/var/www/site:
            >>> adapter.get_document_root()
            '/var/www/site'
        """
        value = os.getenv(self._document_root_variable)
        if value is None or not value.strip():
            return None
        return value
