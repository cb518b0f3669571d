"""Per-variant error defaults.

Each error variant carries a static configuration record: the key used when
the caller names none, the built-in fallback message, default substitution
data, default HTTP code and default details. The table is consulted once per
error construction.

The fallback message is the last resort of message resolution, so every
entry must carry a non-empty one.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from errkit.core.enums import ErrorVariant


@dataclass(frozen=True, slots=True, kw_only=True)
class VariantDefaults:
    """Static defaults for one error variant.

    Attributes:
        key: Default error key (without the 'error.' prefix).
        fallback: Built-in message used when nothing else resolves.
        http_code: Default HTTP status code.
        data: Default substitution data.
        details: Default supplementary details.
    """

    key: str
    fallback: str
    http_code: int = 500
    data: Mapping[str, Any] = field(default_factory=dict)
    details: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Reject defaults that could leave an error without a message."""
        if not self.key:
            raise ValueError("VariantDefaults.key must not be empty")
        if not self.fallback:
            raise ValueError("VariantDefaults.fallback must not be empty")


VARIANT_DEFAULTS: dict[ErrorVariant, VariantDefaults] = {
    ErrorVariant.GENERAL: VariantDefaults(
        key="general",
        fallback="An error occurred",
    ),
    ErrorVariant.AUTH: VariantDefaults(
        key="auth",
        fallback="Unauthenticated",
        http_code=401,
    ),
    ErrorVariant.BAD_METHOD_CALL: VariantDefaults(
        key="invalidMethod",
        fallback='The method "{{ method }}" does not exist',
        http_code=400,
        data={"method": None},
    ),
    ErrorVariant.DUPLICATE: VariantDefaults(
        key="duplicate",
        fallback="The entry exists",
        http_code=400,
    ),
    ErrorVariant.ERROR_PAGE: VariantDefaults(
        key="errorPage",
        fallback="Triggered error page",
        http_code=404,
    ),
    ErrorVariant.INVALID_ARGUMENT: VariantDefaults(
        key="invalidArgument",
        fallback='Invalid argument "{{ argument }}" in method "{{ method }}"',
        http_code=400,
        data={"argument": None, "method": None},
    ),
    ErrorVariant.LOGIC: VariantDefaults(
        key="logic",
        fallback="This task cannot be finished",
        http_code=400,
    ),
    ErrorVariant.NOT_FOUND: VariantDefaults(
        key="notFound",
        fallback="Not found",
        http_code=404,
    ),
    ErrorVariant.PERMISSION: VariantDefaults(
        key="permission",
        fallback="You are not allowed to do this",
        http_code=403,
    ),
}


def get_variant_defaults(variant: ErrorVariant) -> VariantDefaults:
    """Look up the defaults for a variant.

    Args:
        variant: Variant tag.

    Returns:
        VariantDefaults for the variant.

    Raises:
        KeyError: If the variant has no table entry.
    """
    return VARIANT_DEFAULTS[variant]
