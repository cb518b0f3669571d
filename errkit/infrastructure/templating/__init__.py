"""Message templating adapters."""

from errkit.infrastructure.templating.placeholder_engine import PlaceholderEngine

__all__ = ["PlaceholderEngine"]
