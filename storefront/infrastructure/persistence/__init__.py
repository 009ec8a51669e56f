"""Persistence layer (SQLAlchemy async ORM)."""

from storefront.infrastructure.persistence.base import BaseModel
from storefront.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "Database"]
