"""Pytest configuration.

This configuration ensures:
1. Async tests run under pytest-asyncio (asyncio_mode=auto in pyproject)
2. Each integration test gets a fresh in-memory SQLite database
3. Settings and container caches are cleared between tests
"""

import inspect
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from storefront.core.config import get_settings
from storefront.core.container import get_database, get_logger
from storefront.domain.entities.customer import Customer
from storefront.domain.entities.order_item import OrderItem
from storefront.domain.entities.product import Product
from storefront.domain.value_objects.address import Address
from storefront.infrastructure.events.event_dispatcher import EventDispatcher
from storefront.infrastructure.persistence.database import Database


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real (in-memory) database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset cached settings and singletons so env patches take effect."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_database.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_database.cache_clear()


@pytest.fixture
def mock_logger():
    """Create mock LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def dispatcher(mock_logger) -> EventDispatcher:
    """Fresh fail-fast dispatcher with a mocked logger."""
    return EventDispatcher(logger=mock_logger)


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database with all tables created.

    Each test gets its own engine, so no data persists between tests.
    """
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.create_all()

    yield database

    await database.drop_all()
    await database.close()


# Test helper functions for domain entities


def create_address(street: str = "Street 1", number: int = 1) -> Address:
    """Helper to create an Address for testing."""
    return Address(street=street, number=number, zip_code="Zipcode 1", city="City 1")


def create_customer(
    customer_id: str = "123", name: str = "Customer 1", with_address: bool = True
) -> Customer:
    """Helper to create a Customer (with address by default)."""
    customer = Customer(id=customer_id, name=name)
    if with_address:
        customer.change_address(create_address())
    return customer


def create_product(
    product_id: str = "123", name: str = "Product 1", price: str = "10"
) -> Product:
    """Helper to create a Product."""
    return Product(id=product_id, name=name, price=Decimal(price))


def create_order_item(
    product: Product, item_id: str = "1", quantity: int = 2
) -> OrderItem:
    """Helper to create an OrderItem snapshotting product name and price."""
    return OrderItem(
        id=item_id,
        name=product.name,
        price=product.price,
        product_id=product.id,
        quantity=quantity,
    )
