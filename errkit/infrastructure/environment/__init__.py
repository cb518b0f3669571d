"""Server environment adapters."""

from errkit.infrastructure.environment.env_adapter import EnvAdapter

__all__ = ["EnvAdapter"]
