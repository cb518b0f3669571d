"""Common error variants used across applications.

Each class only selects its variant tag; defaults (key, fallback message,
HTTP code, data) live in the VARIANT_DEFAULTS table.

Error Types:
- AuthError: Authentication required (401)
- BadMethodCallError: Unknown method called (400)
- DuplicateError: Entry already exists (400)
- ErrorPageError: Render the error page (404)
- InvalidArgumentError: Invalid argument passed to a method (400)
- LogicError: Task cannot be finished in the current state (400)
- NotFoundError: Resource not found (404)
- PermissionDeniedError: Action not allowed (403)

Usage:
    from errkit.core.errors import NotFoundError

    raise NotFoundError(
        key="page.notFound",
        data={"slug": slug},
        fallback='The page "{{ slug }}" cannot be found',
    )
"""

from typing import ClassVar

from errkit.core.enums import ErrorVariant
from errkit.core.errors.structured_error import StructuredError


class AuthError(StructuredError):
    """Authentication failure (missing or invalid credentials)."""

    variant: ClassVar[ErrorVariant] = ErrorVariant.AUTH


class BadMethodCallError(StructuredError):
    """A method that does not exist was called.

    Data:
        method: Name of the missing method.
    """

    variant: ClassVar[ErrorVariant] = ErrorVariant.BAD_METHOD_CALL


class DuplicateError(StructuredError):
    """An entry with the same identity already exists."""

    variant: ClassVar[ErrorVariant] = ErrorVariant.DUPLICATE


class ErrorPageError(StructuredError):
    """Signals that the error page should be rendered."""

    variant: ClassVar[ErrorVariant] = ErrorVariant.ERROR_PAGE


class InvalidArgumentError(StructuredError):
    """An argument passed to a method is invalid.

    Data:
        argument: Name of the offending argument.
        method: Method that received it.
    """

    variant: ClassVar[ErrorVariant] = ErrorVariant.INVALID_ARGUMENT


class LogicError(StructuredError):
    """The requested task cannot be finished in the current state."""

    variant: ClassVar[ErrorVariant] = ErrorVariant.LOGIC


class NotFoundError(StructuredError):
    """A requested resource does not exist."""

    variant: ClassVar[ErrorVariant] = ErrorVariant.NOT_FOUND


class PermissionDeniedError(StructuredError):
    """The current user is not allowed to perform the action."""

    variant: ClassVar[ErrorVariant] = ErrorVariant.PERMISSION
