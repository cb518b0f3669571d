"""Error variant tags.

Every concrete error class is tagged with exactly one variant. The tag is
the lookup key into the variant defaults table
(`errkit.core.errors.variant_defaults`), which holds the default key,
fallback message, data, HTTP code and details for that kind of error.
"""

from enum import Enum


class ErrorVariant(str, Enum):
    """Kinds of structured errors."""

    GENERAL = "general"
    AUTH = "auth"
    BAD_METHOD_CALL = "bad_method_call"
    DUPLICATE = "duplicate"
    ERROR_PAGE = "error_page"
    INVALID_ARGUMENT = "invalid_argument"
    LOGIC = "logic"
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
