"""Domain Events Registry - Single Source of Truth.

Catalogs every domain event in the system with its metadata. Used for:
- Container wiring (default handler subscriptions)
- Validation tests (every event has a handler, names are unique)

Adding new events:
1. Define event dataclass in the appropriate *_events.py file
2. Add an entry to EVENT_REGISTRY below
3. Add its default handlers in storefront.core.container
4. Run tests - the registry compliance tests tell you what's missing
"""

from dataclasses import dataclass
from enum import Enum

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerCreated,
)
from storefront.domain.events.product_events import ProductCreated


class EventCategory(Enum):
    """Event categories for organization and filtering."""

    CUSTOMER = "customer"
    PRODUCT = "product"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        category: Event category.
        description: What happened, in one line.
    """

    event_class: type[DomainEvent]
    category: EventCategory
    description: str

    @property
    def event_name(self) -> str:
        return self.event_class.event_name


EVENT_REGISTRY: list[EventMetadata] = [
    EventMetadata(
        event_class=CustomerCreated,
        category=EventCategory.CUSTOMER,
        description="Customer was created",
    ),
    EventMetadata(
        event_class=CustomerAddressChanged,
        category=EventCategory.CUSTOMER,
        description="Customer address was changed",
    ),
    EventMetadata(
        event_class=ProductCreated,
        category=EventCategory.PRODUCT,
        description="Product was created",
    ),
]


def get_event_metadata(event_name: str) -> EventMetadata | None:
    """Look up registry entry by event name.

    Args:
        event_name: Dispatcher routing key (e.g., "CustomerCreated").

    Returns:
        Matching EventMetadata, or None if the name is not registered.
    """
    for metadata in EVENT_REGISTRY:
        if metadata.event_name == event_name:
            return metadata
    return None
