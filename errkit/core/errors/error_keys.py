"""Error key normalization.

Every error key lives under the fixed `error.` namespace. Keys may be
written with or without the prefix; both spellings normalize to the same
fully-qualified key.

Usage:
    >>> normalize_key("file.not-found")
    'error.file.not-found'
    >>> normalize_key("error.file.not-found")
    'error.file.not-found'
"""

from errkit.core.constants import ERROR_KEY_PREFIX

_NAMESPACE = f"{ERROR_KEY_PREFIX}."


def normalize_key(raw_key: str) -> str:
    """Namespace a key under the error prefix.

    Idempotent: normalizing an already-normalized key returns it unchanged.

    Args:
        raw_key: Key with or without the 'error.' prefix.

    Returns:
        Fully-qualified key.
    """
    if raw_key.startswith(_NAMESPACE):
        return raw_key
    return _NAMESPACE + raw_key
