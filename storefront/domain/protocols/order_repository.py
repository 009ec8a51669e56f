"""OrderRepository protocol (port).

Implementations:
    - OrderRepository: storefront/infrastructure/persistence/repositories/order_repository.py
"""

from typing import Protocol

from storefront.domain.entities.order import Order


class OrderRepository(Protocol):
    """Persistence boundary for Order aggregates (order + items)."""

    async def create(self, entity: Order) -> None:
        """Insert order and all its items."""
        ...

    async def update(self, entity: Order) -> None:
        """Persist customer, total, and replace the item set."""
        ...

    async def find(self, order_id: str) -> Order | None:
        """Find order (with items) by id, None if missing."""
        ...

    async def find_all(self) -> list[Order]:
        """List all orders with items."""
        ...
