"""Exception handlers for FastAPI applications.

Converts raised StructuredError instances into JSON responses carrying the
error's serialized form and HTTP code.

Exports:
    structured_error_handler: Handler for StructuredError
    register_error_handlers: Register the handler with a FastAPI app
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from errkit.core.container import get_logger
from errkit.core.errors import StructuredError
from errkit.presentation.api.error_payload import ErrorPayload


async def structured_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle a StructuredError.

    Logs the error (WARNING for 4xx, ERROR for 5xx) and returns its
    serialized form with the error's HTTP code as status.

    Args:
        request: FastAPI Request object
        exc: Raised StructuredError

    Returns:
        JSONResponse with the ErrorPayload content
    """
    if not isinstance(exc, StructuredError):
        raise exc

    payload = ErrorPayload(**exc.to_dict())
    logger = get_logger().bind(
        error_key=exc.key,
        http_code=exc.http_code,
        request_path=request.url.path,
    )
    if exc.http_code >= 500:
        logger.error(
            "Structured error raised",
            error=exc,
            file=payload.file,
            line=payload.line,
        )
    else:
        logger.warning("Structured error raised", error_message=exc.message)

    # details may hold datetimes, UUIDs or Decimals
    return JSONResponse(
        status_code=exc.http_code, content=payload.model_dump(mode="json")
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the StructuredError handler with a FastAPI application.

    Subclasses of StructuredError are covered by the same handler.

    Args:
        app: FastAPI application instance

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_error_handlers(app)
    """
    app.add_exception_handler(StructuredError, structured_error_handler)
