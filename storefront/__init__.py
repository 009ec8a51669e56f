"""Storefront: a domain-driven storefront with in-process domain events.

Layers:
- core/: settings, errors, Result types, composition root
- domain/: entities, value objects, domain events, protocols, services
- application/: commands and command handlers
- infrastructure/: event dispatcher, event handlers, logging, persistence
"""

__version__ = "0.1.0"
