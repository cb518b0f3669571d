"""Presentation layer: HTTP surface for structured errors."""
