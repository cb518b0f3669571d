"""In-memory catalog translator.

Implements TranslatorProtocol over per-locale message catalogs that are
already loaded into the process. Lookups consult the active locale first and
the default locale second.

Catalogs may be flat or nested; nested mappings are flattened to dotted keys
once at construction:

    {"en": {"error": {"notFound": "Not found"}}}
    {"en": {"error.notFound": "Not found"}}

both answer lookup("error.notFound").
"""

from collections.abc import Mapping
from typing import Any

from errkit.core.constants import DEFAULT_LOCALE


def flatten_catalog(catalog: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested catalog mappings into dotted keys.

    Args:
        catalog: Possibly nested mapping of message keys.
        prefix: Key prefix carried down the recursion.

    Returns:
        Flat dict of dotted key -> entry.
    """
    flat: dict[str, Any] = {}
    for name, entry in catalog.items():
        key = f"{prefix}.{name}" if prefix else str(name)
        if isinstance(entry, Mapping):
            flat.update(flatten_catalog(entry, key))
        else:
            flat[key] = entry
    return flat


class CatalogTranslator:
    """Translator backed by in-process message catalogs.

    Args:
        catalogs: Catalogs keyed by locale code.
        locale: Active locale.
        default_locale: Locale consulted when the active one has no entry.

    Example:
        >>> translator = CatalogTranslator(
        ...     {"en": {"error.notFound": "Not found"}, "de": {}},
        ...     locale="de",
        ... )
        >>> translator.lookup("error.notFound")
        'Not found'
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, Any]],
        *,
        locale: str = DEFAULT_LOCALE,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._catalogs: dict[str, dict[str, Any]] = {
            code: flatten_catalog(catalog) for code, catalog in catalogs.items()
        }
        self._locale = locale
        self._default_locale = default_locale

    @property
    def locale(self) -> str:
        """Active locale code."""
        return self._locale

    @property
    def default_locale(self) -> str:
        """Fallback locale code."""
        return self._default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        """Locales that have a catalog loaded."""
        return tuple(self._catalogs)

    @property
    def is_available(self) -> bool:
        """True when at least one catalog is loaded."""
        return bool(self._catalogs)

    def lookup(self, key: str) -> str | None:
        """Return the template for key in the active or default locale.

        Args:
            key: Fully-qualified key like 'error.file.not-found'.

        Returns:
            Template string, or None when neither locale has a string entry.
        """
        for code in (self._locale, self._default_locale):
            entry = self._catalogs.get(code, {}).get(key)
            if isinstance(entry, str):
                return entry
        return None

    def with_locale(self, locale: str) -> "CatalogTranslator":
        """Return a translator for another active locale.

        The catalogs are shared; the original instance is unchanged.

        Args:
            locale: New active locale.

        Returns:
            CatalogTranslator: Translator bound to the new locale.
        """
        translator = CatalogTranslator.__new__(CatalogTranslator)
        translator._catalogs = self._catalogs
        translator._locale = locale
        translator._default_locale = self._default_locale
        return translator
