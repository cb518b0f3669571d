"""Where a resolved error message came from.

Recorded on every error so diagnostics can tell a translated message from
caller-supplied or built-in text without re-running resolution.
"""

from enum import Enum


class MessageSource(str, Enum):
    """Branch of the message waterfall that produced the final text."""

    RAW = "raw"
    KEY_TRANSLATION = "key_translation"
    FALLBACK = "fallback"
    DEFAULT_KEY_TRANSLATION = "default_key_translation"
    DEFAULT_FALLBACK = "default_fallback"

    @property
    def is_translated(self) -> bool:
        """Whether this source is a translation catalog."""
        return self in (
            MessageSource.KEY_TRANSLATION,
            MessageSource.DEFAULT_KEY_TRANSLATION,
        )
