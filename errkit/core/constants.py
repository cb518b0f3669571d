"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `errkit/core/config.py` instead.

Categories:
- Prefixes: Namespace prefix for error keys
- Templating: Placeholder delimiters and fallback marker
- Locales: Locale used when nothing else is configured

Example:
    >>> from errkit.core.constants import ERROR_KEY_PREFIX
    >>> f"{ERROR_KEY_PREFIX}.general"
    'error.general'
"""

# =============================================================================
# Prefixes
# =============================================================================

ERROR_KEY_PREFIX: str = "error"
"""Namespace every error key lives under (e.g. 'error.general')."""


# =============================================================================
# Templating
# =============================================================================

TEMPLATE_FALLBACK_MARKER: str = "-"
"""Substituted for placeholders that have no usable value."""

PLACEHOLDER_START: str = "{{"
"""Opening delimiter of a message placeholder."""

PLACEHOLDER_END: str = "}}"
"""Closing delimiter of a message placeholder."""


# =============================================================================
# Locales
# =============================================================================

DEFAULT_LOCALE: str = "en"
"""Locale consulted when the active locale has no translation."""
