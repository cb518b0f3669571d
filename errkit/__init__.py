"""errkit - structured, localizable errors.

Usage:
    from errkit import NotFoundError, StructuredError

    raise NotFoundError(key="page.notFound", data={"slug": "home"})
"""

from errkit.core.errors import (
    AuthError,
    BadMethodCallError,
    DuplicateError,
    ErrorArgs,
    ErrorContext,
    ErrorPageError,
    InvalidArgumentError,
    LogicError,
    NotFoundError,
    PermissionDeniedError,
    StructuredError,
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
    "StructuredError",
]
__version__ = "0.1.0"
