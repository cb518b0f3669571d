"""Template engine protocol (port) for placeholder substitution."""

from collections.abc import Mapping
from typing import Any, Protocol


class TemplateEngineProtocol(Protocol):
    """Protocol for rendering message templates with substitution data.

    Implementations MUST NOT raise for missing or malformed data: any
    placeholder without a usable value is replaced by the fallback marker.
    """

    def render(self, template: str, data: Mapping[str, Any], fallback: str) -> str:
        """Render a template.

        Args:
            template: Text containing placeholders (e.g. 'File {{ filename }}').
            data: Substitution values keyed by placeholder name.
            fallback: Marker substituted for unresolved placeholders.

        Returns:
            Rendered text.
        """
        ...
