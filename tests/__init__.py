"""Test suite for the storefront package.

Test structure:
- unit/: Unit tests - domain logic, dispatcher, handlers, config (mocked dependencies)
- integration/: Integration tests - repositories and event flow on in-memory SQLite
"""
