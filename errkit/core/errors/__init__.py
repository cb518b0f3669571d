"""Core errors package.

Exports the structured error base class, its variants, and the building
blocks of message resolution.

Usage:
    from errkit.core.errors import StructuredError, NotFoundError, ErrorContext
"""

from errkit.core.errors.common_errors import (
    AuthError,
    BadMethodCallError,
    DuplicateError,
    ErrorPageError,
    InvalidArgumentError,
    LogicError,
    NotFoundError,
    PermissionDeniedError,
)
from errkit.core.errors.error_args import ErrorArgs
from errkit.core.errors.error_context import ErrorContext
from errkit.core.errors.error_keys import normalize_key
from errkit.core.errors.file_paths import relativize_path
from errkit.core.errors.message_resolver import ResolvedMessage, resolve_message
from errkit.core.errors.structured_error import StructuredError
from errkit.core.errors.variant_defaults import (
    VARIANT_DEFAULTS,
    VariantDefaults,
    get_variant_defaults,
)

__all__ = [
    "AuthError",
    "BadMethodCallError",
    "DuplicateError",
    "ErrorArgs",
    "ErrorContext",
    "ErrorPageError",
    "InvalidArgumentError",
    "LogicError",
    "NotFoundError",
    "PermissionDeniedError",
    "ResolvedMessage",
    "StructuredError",
    "VARIANT_DEFAULTS",
    "VariantDefaults",
    "get_variant_defaults",
    "normalize_key",
    "relativize_path",
    "resolve_message",
]
