"""FastAPI integration.

Exports:
    ErrorPayload: Schema of a serialized structured error
    register_error_handlers: Install the StructuredError handler on an app
"""

from errkit.presentation.api.error_handlers import (
    register_error_handlers,
    structured_error_handler,
)
from errkit.presentation.api.error_payload import ErrorPayload

__all__ = ["ErrorPayload", "register_error_handlers", "structured_error_handler"]
