"""Base structured error.

StructuredError is the base class for every error raised through errkit.
It is built from either a plain message or a structured description and is
fully resolved at construction: key, message, data, details, HTTP code and
source location never change afterwards.

Architecture:
- Inherits from Exception (raised, unlike result-typed domain errors)
- Per-variant defaults come from the VARIANT_DEFAULTS table, selected by
  the class's `variant` tag
- Collaborators (translator, template engine, document root) come from an
  explicit ErrorContext, or the container's default context when omitted
- to_dict() is the canonical serialization consumed by HTTP rendering and
  log shipping; its field names are fixed

Usage:
    from errkit.core.errors import StructuredError

    raise StructuredError("disk full")

    raise StructuredError(
        key="file.not-found",
        data={"filename": "a.txt"},
        fallback="File {{ filename }} not found",
    )
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import Any, ClassVar

from errkit.core.enums import ErrorVariant, MessageSource
from errkit.core.errors.error_args import ErrorArgs
from errkit.core.errors.error_context import ErrorContext
from errkit.core.errors.error_keys import normalize_key
from errkit.core.errors.file_paths import relativize_path
from errkit.core.errors.message_resolver import resolve_message
from errkit.core.errors.variant_defaults import get_variant_defaults


def _coerce_args(
    message: str | Mapping[str, Any] | ErrorArgs | None, options: dict[str, Any]
) -> tuple[str | None, ErrorArgs]:
    """Split constructor input into a raw message and a structured bundle.

    Raises:
        TypeError: On an unsupported positional argument or unknown option.
    """
    if isinstance(message, str):
        # an empty raw message resolves like a structured one
        return message or None, ErrorArgs(**options)
    if isinstance(message, ErrorArgs):
        return None, replace(message, **options) if options else message
    if isinstance(message, Mapping):
        return None, ErrorArgs(**{**message, **options})
    if message is None:
        return None, ErrorArgs(**options)
    raise TypeError(
        "StructuredError expects a message string, a mapping or ErrorArgs, "
        f"got {type(message).__name__}"
    )


class StructuredError(Exception):
    """Error carrying a resolved, optionally translated message.

    Args:
        message: Plain message string, or a structured description given as
            a mapping or ErrorArgs. Omit to use keyword options only.
        context: Collaborators used for resolution. Defaults to the
            container's cached context.
        **options: Structured fields (key, translate, fallback, data,
            http_code, details, cause); merged over a mapping description.

    Raises:
        TypeError: If an option name is unknown.
    """

    variant: ClassVar[ErrorVariant] = ErrorVariant.GENERAL

    def __init__(
        self,
        message: str | Mapping[str, Any] | ErrorArgs | None = None,
        /,
        *,
        context: ErrorContext | None = None,
        **options: Any,
    ) -> None:
        raw_message, args = _coerce_args(message, options)
        defaults = get_variant_defaults(self.variant)

        if context is None:
            from errkit.core.container import get_error_context

            context = get_error_context()

        resolved = resolve_message(
            raw_message if raw_message is not None else args, defaults, context
        )
        super().__init__(resolved.message)

        self._message = resolved.message
        self._message_source = resolved.source
        # an empty key counts as absent
        self._key = normalize_key(args.key or defaults.key)
        self._data = dict(args.data if args.data is not None else defaults.data)
        self._details = dict(
            args.details if args.details is not None else defaults.details
        )
        self._http_code = (
            args.http_code if args.http_code is not None else defaults.http_code
        )
        self._cause = args.cause
        self._document_root = context.document_root
        self._source_file, self._source_line = self._capture_location()

        if args.cause is not None:
            self.__cause__ = args.cause

    def _capture_location(self) -> tuple[str, int]:
        """Find the frame that constructed this error.

        Frames belonging to this instance's __init__ chain (including
        subclass constructors) are skipped.
        """
        frame = sys._getframe(1)
        while frame is not None and frame.f_locals.get("self") is self:
            frame = frame.f_back
        if frame is None:
            return "<unknown>", 0
        return frame.f_code.co_filename, frame.f_lineno

    @property
    def message(self) -> str:
        """Resolved, rendered message."""
        return self._message

    @property
    def key(self) -> str:
        """Fully-qualified error key; doubles as the error's type code."""
        return self._key

    @property
    def data(self) -> Mapping[str, Any]:
        """Substitution data (read-only view)."""
        return MappingProxyType(self._data)

    @property
    def details(self) -> Mapping[str, Any]:
        """Supplementary details not embedded in the message (read-only view)."""
        return MappingProxyType(self._details)

    @property
    def http_code(self) -> int:
        """HTTP status code corresponding to the error."""
        return self._http_code

    @property
    def is_translated(self) -> bool:
        """Whether the message came from the translator."""
        return self._message_source.is_translated

    @property
    def message_source(self) -> MessageSource:
        """Resolution step that produced the message."""
        return self._message_source

    @property
    def cause(self) -> BaseException | None:
        """Error that led to this one, if any."""
        return self._cause

    @property
    def source_file(self) -> str:
        """Absolute path of the file that created the error."""
        return self._source_file

    @property
    def source_line(self) -> int:
        """Line at which the error was created."""
        return self._source_line

    def get_file_relative(self, document_root: str | None = None) -> str:
        """Return the source file relative to the document root.

        Args:
            document_root: Root to strip. Defaults to the document root of
                the context the error was built with.

        Returns:
            Relativized path; the absolute path when no root applies.
        """
        root = document_root if document_root is not None else self._document_root
        return relativize_path(self._source_file, root)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error to its canonical plain form.

        Returns:
            Mapping with exactly the fields exception, message, key, file,
            line, details and code. `code` carries the HTTP code.
        """
        return {
            "exception": type(self).__name__,
            "message": self._message,
            "key": self._key,
            "file": self.get_file_relative(),
            "line": self._source_line,
            "details": dict(self._details),
            "code": self._http_code,
        }

    def __repr__(self) -> str:
        """Debug representation."""
        return (
            f"{type(self).__name__}(key={self._key!r}, message={self._message!r}, "
            f"http_code={self._http_code})"
        )
