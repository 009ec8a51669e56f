"""Domain events module.

Domain events are immutable records of things that happened. They are
dispatched synchronously to handlers through the event dispatcher.

Usage:
    from storefront.domain.events import CustomerCreated, CustomerCreatedData

    event = CustomerCreated(event_data=CustomerCreatedData(id="1", name="A"))
    dispatcher.notify(event)
"""

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerAddressChangedData,
    CustomerCreated,
    CustomerCreatedData,
)
from storefront.domain.events.product_events import ProductCreated, ProductCreatedData

__all__ = [
    "CustomerAddressChanged",
    "CustomerAddressChangedData",
    "CustomerCreated",
    "CustomerCreatedData",
    "DomainEvent",
    "ProductCreated",
    "ProductCreatedData",
]
