"""Customer domain events.

Handlers:
- CustomerCreated: FirstCustomerCreatedLogHandler, SecondCustomerCreatedLogHandler
- CustomerAddressChanged: NotifyWhenAddressChangedHandler
"""

from dataclasses import dataclass
from typing import ClassVar

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.value_objects.address import Address


@dataclass(frozen=True, kw_only=True)
class CustomerCreatedData:
    """Payload of CustomerCreated.

    Attributes:
        id: New customer's id.
        name: New customer's name.
    """

    id: str
    name: str


@dataclass(frozen=True, kw_only=True)
class CustomerCreated(DomainEvent[CustomerCreatedData]):
    """Customer was created and persisted."""

    event_name: ClassVar[str] = "CustomerCreated"


@dataclass(frozen=True, kw_only=True)
class CustomerAddressChangedData:
    """Payload of CustomerAddressChanged.

    Attributes:
        id: Customer id.
        name: Customer name.
        address: The new address.
    """

    id: str
    name: str
    address: Address


@dataclass(frozen=True, kw_only=True)
class CustomerAddressChanged(DomainEvent[CustomerAddressChangedData]):
    """Customer address was replaced and persisted."""

    event_name: ClassVar[str] = "CustomerAddressChanged"
