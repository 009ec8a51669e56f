"""Database connection and session management.

This module provides database connection management using SQLAlchemy's
async engine and session handling. Repositories receive sessions from here.

Following hexagonal architecture:
- This is an infrastructure concern
- Provides database sessions to repository implementations
- Handles transaction boundaries

SQLite notes:
- In-memory databases use a StaticPool so every session sees the same
  single connection (and therefore the same database).
- Foreign key enforcement is switched on for every SQLite connection.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool


class Database:
    """Database connection and session management.

    Usage:
        db = Database("sqlite+aiosqlite:///:memory:")
        await db.create_all()
        async with db.get_session() as session:
            repo = CustomerRepository(session)
            await repo.create(customer)
            # Automatically commits on success, rolls back on error
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: Database connection URL (e.g., sqlite+aiosqlite:///:memory:)
            echo: If True, log all SQL statements (useful for debugging)
        """
        engine_kwargs: dict[str, Any] = {"echo": echo}
        is_sqlite = database_url.startswith("sqlite")

        if is_sqlite and ":memory:" in database_url:
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        elif not is_sqlite:
            engine_kwargs["pool_pre_ping"] = True

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        if is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Don't expire objects after commit
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional database session.

        This is a context manager that:
        - Creates a new session
        - Commits on successful exit
        - Rolls back on exception
        - Always closes the session

        Yields:
            AsyncSession: Database session for operations
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create all tables defined in the models.

        Used by tests and local development; there is no migration tool.
        """
        from storefront.infrastructure.persistence import models  # noqa: F401
        from storefront.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables defined in the models.

        Warning: This will delete all data! Only use for testing.
        """
        from storefront.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        """Close all database connections."""
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise
        """
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
                return True
        except Exception:
            return False


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
