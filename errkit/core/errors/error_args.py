"""Structured error construction arguments."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorArgs:
    """Structured description of an error.

    Every field is optional; unset fields fall back to the variant defaults.

    Attributes:
        key: Error key, with or without the 'error.' prefix. Empty counts
            as absent.
        translate: Whether the message may come from the translator.
        fallback: Message used when the key has no translation.
        data: Substitution values for message placeholders.
        http_code: HTTP status code.
        details: Supplementary information not embedded in the message.
        cause: Error that led to this one.
    """

    key: str | None = None
    translate: bool = True
    fallback: str | None = None
    data: Mapping[str, Any] | None = None
    http_code: int | None = None
    details: Mapping[str, Any] | None = None
    cause: BaseException | None = None
