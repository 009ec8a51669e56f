"""Event handler protocol (port) for domain events.

An event handler is a single-capability object: it reacts to one event type
with a side effect (logging, notification). Handlers hold no dispatcher
state and return nothing.

Usage:
    >>> class NotifyWhenAddressChangedHandler:
    ...     def handle(self, event: CustomerAddressChanged) -> None:
    ...         logger.info("customer_address_changed", customer_id=event.event_data.id)
    >>>
    >>> dispatcher.register(CustomerAddressChanged.event_name, NotifyWhenAddressChangedHandler())
"""

from typing import Protocol, TypeVar, runtime_checkable

from storefront.domain.events.base_event import DomainEvent

E_contra = TypeVar("E_contra", bound=DomainEvent, contravariant=True)


@runtime_checkable
class EventHandlerProtocol(Protocol[E_contra]):
    """Protocol for synchronous event handlers.

    Implementations do NOT inherit from this protocol (structural typing).
    """

    def handle(self, event: E_contra) -> None:
        """React to a dispatched event.

        Args:
            event: The event instance passed to notify().
        """
        ...
