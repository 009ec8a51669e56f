"""Product domain events.

Handlers:
- ProductCreated: SendEmailWhenProductIsCreatedHandler
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from storefront.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ProductCreatedData:
    """Payload of ProductCreated.

    Attributes:
        id: Product id.
        name: Product name.
        price: Unit price at creation.
    """

    id: str
    name: str
    price: Decimal


@dataclass(frozen=True, kw_only=True)
class ProductCreated(DomainEvent[ProductCreatedData]):
    """Product was created and persisted."""

    event_name: ClassVar[str] = "ProductCreated"
