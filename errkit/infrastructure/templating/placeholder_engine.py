"""Placeholder template engine.

Implements TemplateEngineProtocol for `{{ name }}` style placeholders.

Rules:
    - Whitespace inside the delimiters is ignored: `{{name}}` == `{{ name }}`
    - Dotted names walk nested data: `{{ user.name }}` reads
      data["user"]["name"], falling back to attribute access
    - str, int, float, Decimal and bool values render via str()
    - Missing, None and non-scalar values render as the fallback marker

Rendering never raises for bad data.
"""

import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from errkit.core.constants import (
    PLACEHOLDER_END,
    PLACEHOLDER_START,
    TEMPLATE_FALLBACK_MARKER,
)

_SCALAR_TYPES = (str, int, float, Decimal)

_MISSING = object()


def _walk(data: Mapping[str, Any], name: str) -> Any:
    if name in data:
        return data[name]

    value: Any = data
    for part in name.split("."):
        if isinstance(value, Mapping):
            value = value.get(part, _MISSING)
        else:
            value = getattr(value, part, _MISSING)
        if value is _MISSING:
            return None
    return value


def _resolve(data: Mapping[str, Any], name: str) -> Any:
    """Resolve a possibly dotted placeholder name against data."""
    try:
        return _walk(data, name)
    except Exception:
        # user objects may raise from properties or custom mappings
        return None


class PlaceholderEngine:
    """Render `{{ name }}` placeholders.

    Args:
        start: Opening delimiter.
        end: Closing delimiter.
    """

    def __init__(
        self, *, start: str = PLACEHOLDER_START, end: str = PLACEHOLDER_END
    ) -> None:
        self._pattern = re.compile(re.escape(start) + r"(.*?)" + re.escape(end))

    def render(
        self,
        template: str,
        data: Mapping[str, Any],
        fallback: str = TEMPLATE_FALLBACK_MARKER,
    ) -> str:
        """Substitute every placeholder in template.

        Args:
            template: Text containing placeholders.
            data: Substitution values.
            fallback: Marker used for placeholders without a usable value.

        Returns:
            Rendered text.

        Example:
            >>> PlaceholderEngine().render("File {{ filename }} not found", {})
            'File - not found'
        """
        if not isinstance(data, Mapping):
            data = {}

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1).strip()
            if not name:
                return fallback
            value = _resolve(data, name)
            # bool is an int subclass, so it is covered by _SCALAR_TYPES
            if isinstance(value, _SCALAR_TYPES):
                return str(value)
            return fallback

        return self._pattern.sub(substitute, template)
