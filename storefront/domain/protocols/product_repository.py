"""ProductRepository protocol (port).

Implementations:
    - ProductRepository: storefront/infrastructure/persistence/repositories/product_repository.py
"""

from typing import Protocol

from storefront.domain.entities.product import Product


class ProductRepository(Protocol):
    """Persistence boundary for Product entities."""

    async def create(self, entity: Product) -> None:
        ...

    async def update(self, entity: Product) -> None:
        ...

    async def find(self, product_id: str) -> Product | None:
        ...

    async def find_all(self) -> list[Product]:
        ...
