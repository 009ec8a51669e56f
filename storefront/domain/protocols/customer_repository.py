"""CustomerRepository protocol (port).

Implementations:
    - CustomerRepository: storefront/infrastructure/persistence/repositories/customer_repository.py
"""

from typing import Protocol

from storefront.domain.entities.customer import Customer


class CustomerRepository(Protocol):
    """Persistence boundary for Customer entities."""

    async def create(self, entity: Customer) -> None:
        """Insert a new customer."""
        ...

    async def update(self, entity: Customer) -> None:
        """Persist changes to an existing customer."""
        ...

    async def find(self, customer_id: str) -> Customer | None:
        """Find customer by id, None if missing."""
        ...

    async def find_all(self) -> list[Customer]:
        """List all customers."""
        ...
