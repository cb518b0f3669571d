"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from errkit.core.enums import Environment, ErrorVariant, MessageSource
"""

from errkit.core.enums.environment import Environment
from errkit.core.enums.error_variant import ErrorVariant
from errkit.core.enums.message_source import MessageSource

__all__ = ["Environment", "ErrorVariant", "MessageSource"]
