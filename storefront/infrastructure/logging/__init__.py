"""Logging adapters implementing LoggerProtocol."""

from storefront.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
