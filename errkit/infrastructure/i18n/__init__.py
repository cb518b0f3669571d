"""Localization adapters."""

from errkit.infrastructure.i18n.catalog_translator import CatalogTranslator

__all__ = ["CatalogTranslator"]
