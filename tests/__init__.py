"""Test suite for errkit.

Test structure:
- unit/: Unit tests - message resolution, adapters and HTTP handler in isolation
  (tests marked integration wire real adapters through the container)
"""
