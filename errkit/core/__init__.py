"""Core shared kernel.

Foundational pieces used across all layers:
- Settings (pydantic-settings)
- Enums (environment, error variants, message sources)
- Structured errors and message resolution
- Composition root (container)

The core errors module has NO dependencies on infrastructure adapters;
only the container wires them in.
"""
