"""Unit tests for CatalogTranslator.

Tests cover:
- Active locale lookups and default locale fallback
- Nested catalog flattening
- Availability probe
- Locale switching without mutation
"""

import pytest

from errkit.infrastructure.i18n import CatalogTranslator
from errkit.infrastructure.i18n.catalog_translator import flatten_catalog

CATALOGS = {
    "en": {"error.notFound": "Not found", "error.auth": "Please log in"},
    "de": {"error.notFound": "Nicht gefunden"},
}


@pytest.mark.unit
class TestLookup:
    """Test CatalogTranslator.lookup()."""

    def test_active_locale(self):
        """Test entry from the active locale."""
        translator = CatalogTranslator(CATALOGS, locale="de")

        assert translator.lookup("error.notFound") == "Nicht gefunden"

    def test_falls_back_to_default_locale(self):
        """Test missing entry is read from the default locale."""
        translator = CatalogTranslator(CATALOGS, locale="de", default_locale="en")

        assert translator.lookup("error.auth") == "Please log in"

    def test_missing_everywhere_returns_none(self):
        """Test absent key yields None."""
        translator = CatalogTranslator(CATALOGS, locale="de")

        assert translator.lookup("error.unknown") is None

    def test_unknown_active_locale(self):
        """Test an active locale without catalog uses the default locale."""
        translator = CatalogTranslator(CATALOGS, locale="fr")

        assert translator.lookup("error.notFound") == "Not found"

    def test_non_string_entry_is_absent(self):
        """Test non-string catalog values are ignored."""
        translator = CatalogTranslator({"en": {"error.count": 3}})

        assert translator.lookup("error.count") is None

    def test_nested_catalog(self):
        """Test nested mappings are addressable by dotted keys."""
        translator = CatalogTranslator(
            {"en": {"error": {"file": {"not-found": "File missing"}}}}
        )

        assert translator.lookup("error.file.not-found") == "File missing"


@pytest.mark.unit
class TestAvailability:
    """Test the availability probe."""

    def test_available_with_catalogs(self):
        """Test loaded catalogs make the translator available."""
        assert CatalogTranslator(CATALOGS).is_available is True

    def test_unavailable_without_catalogs(self):
        """Test no catalogs means unavailable."""
        assert CatalogTranslator({}).is_available is False


@pytest.mark.unit
class TestWithLocale:
    """Test CatalogTranslator.with_locale()."""

    def test_returns_new_translator(self):
        """Test switching locale leaves the original untouched."""
        english = CatalogTranslator(CATALOGS, locale="en")

        german = english.with_locale("de")

        assert german is not english
        assert german.locale == "de"
        assert german.default_locale == "en"
        assert english.locale == "en"
        assert german.lookup("error.notFound") == "Nicht gefunden"
        assert english.lookup("error.notFound") == "Not found"

    def test_locales(self):
        """Test loaded locale codes are reported."""
        assert CatalogTranslator(CATALOGS).locales == ("en", "de")


@pytest.mark.unit
class TestFlattenCatalog:
    """Test flatten_catalog()."""

    def test_mixed_flat_and_nested(self):
        """Test flat and nested keys merge into one flat mapping."""
        flat = flatten_catalog(
            {"error.general": "General", "error": {"auth": "Auth"}, "title": "T"}
        )

        assert flat == {"error.general": "General", "error.auth": "Auth", "title": "T"}
