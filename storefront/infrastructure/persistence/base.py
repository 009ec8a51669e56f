"""Declarative base for all database models.

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities do NOT inherit from this
- Repositories map domain entities to/from models

Entity ids are assigned by the domain (strings), so the base declares no
primary key; every model declares its own `id` column.
"""

from typing import Any

from sqlalchemy.orm import DeclarativeBase


class BaseModel(DeclarativeBase):
    """Base class for all database models."""

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"

    def to_dict(self) -> dict[str, Any]:
        """Column values keyed by column name (for debugging/logging/tests).

        Returns:
            dict: Dictionary representation of the row.
        """
        return {
            column.key: getattr(self, column.key) for column in self.__table__.columns
        }
