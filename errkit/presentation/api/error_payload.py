"""Serialized structured error schema.

Pydantic model mirroring StructuredError.to_dict(). Field names are part of
the wire/log format and must not change.

Exports:
    ErrorPayload: Schema of a serialized structured error
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorPayload(BaseModel):
    """Serialized structured error.

    Attributes:
        exception: Concrete error class name
        message: Resolved human-readable message
        key: Fully-qualified error key
        file: Source file relative to the document root
        line: Source line
        details: Supplementary details
        code: HTTP status code

    Examples:
        >>> payload = ErrorPayload(
        ...     exception="NotFoundError",
        ...     message="Not found",
        ...     key="error.notFound",
        ...     file="app/views.py",
        ...     line=42,
        ...     details={},
        ...     code=404,
        ... )
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    exception: str = Field(
        ...,
        description="Concrete error class name",
        examples=["NotFoundError"],
    )
    message: str = Field(
        ...,
        description="Resolved human-readable message",
        examples=["Not found"],
    )
    key: str = Field(
        ...,
        description="Fully-qualified error key",
        examples=["error.notFound"],
    )
    file: str = Field(
        ...,
        description="Source file relative to the document root",
        examples=["app/views.py"],
    )
    line: int = Field(
        ...,
        description="Source line",
        examples=[42],
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Supplementary details",
    )
    code: int = Field(
        ...,
        description="HTTP status code",
        examples=[404],
    )
