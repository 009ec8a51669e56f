"""Infrastructure layer - adapters for domain ports.

- events/: event dispatcher and event handlers
- logging/: structlog logging adapter
- persistence/: SQLAlchemy database, models, and repositories
"""
