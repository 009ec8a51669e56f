"""Integration tests for database infrastructure.

Tests database connectivity and session management with in-memory SQLite:
    - Database connection
    - Session lifecycle (commit on success, rollback on error)
    - Schema creation
    - Foreign key enforcement
"""

from decimal import Decimal

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError

from storefront.infrastructure.persistence.models import ProductModel


@pytest.mark.integration
class TestDatabaseIntegration:
    """Integration tests for database infrastructure."""

    async def test_database_connection_works(self, test_database):
        assert await test_database.check_connection() is True

    async def test_create_all_creates_tables(self, test_database):
        async with test_database.engine.connect() as conn:
            tables = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_table_names()
            )

        assert {"customers", "products", "orders", "order_items"} <= set(tables)

    async def test_session_commits_on_success(self, test_database):
        async with test_database.get_session() as session:
            session.add(ProductModel(id="p1", name="Product 1", price=Decimal("10")))

        async with test_database.get_session() as session:
            model = await session.get(ProductModel, "p1")

        assert model is not None
        assert model.to_dict() == {
            "id": "p1",
            "name": "Product 1",
            "price": Decimal("10"),
        }
        assert repr(model) == "<ProductModel(id=p1)>"

    async def test_session_rolls_back_on_error(self, test_database):
        with pytest.raises(RuntimeError):
            async with test_database.get_session() as session:
                session.add(ProductModel(id="p1", name="Product 1", price=Decimal("10")))
                await session.flush()
                raise RuntimeError("abort")

        async with test_database.get_session() as session:
            assert await session.get(ProductModel, "p1") is None

    async def test_foreign_keys_enforced(self, test_database):
        with pytest.raises(IntegrityError):
            async with test_database.get_session() as session:
                await session.execute(
                    text(
                        "INSERT INTO orders (id, customer_id, total) "
                        "VALUES ('o1', 'ghost', 0)"
                    )
                )
