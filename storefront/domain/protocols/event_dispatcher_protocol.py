"""Event dispatcher protocol (port) for domain events.

The dispatcher is an in-process registry mapping event names to ordered
handler lists. notify() invokes every handler registered for the event's
name synchronously, in registration order.

Implementations:
    - EventDispatcher: storefront/infrastructure/events/event_dispatcher.py

Usage:
    >>> dispatcher = create_event_dispatcher()
    >>> dispatcher.register("CustomerCreated", FirstCustomerCreatedLogHandler(logger))
    >>> dispatcher.notify(CustomerCreated(event_data=CustomerCreatedData(id="1", name="A")))
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.protocols.event_handler_protocol import EventHandlerProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class HandlerFailure:
    """A handler exception recorded under the ISOLATE failure policy.

    Attributes:
        event_name: Name of the event being dispatched.
        handler_name: Class name of the handler that raised.
        error: The exception raised by the handler.
    """

    event_name: str
    handler_name: str
    error: Exception


class EventDispatcherProtocol(Protocol):
    """Protocol for event dispatcher implementations.

    Key Requirements:
        1. **Ordering**: Handlers run in registration order.
        2. **Synchronous**: notify() blocks until every handler returns.
        3. **Duplicates allowed**: Registering a handler twice invokes it twice.
        4. **No handlers is fine**: notify() with nothing registered is a no-op.
    """

    def register(
        self, event_name: str, handler: EventHandlerProtocol[Any]
    ) -> None:
        """Append handler to the list for event_name (created if absent)."""
        ...

    def unregister(
        self, event_name: str, handler: EventHandlerProtocol[Any]
    ) -> None:
        """Remove the first registration of handler; no-op if absent."""
        ...

    def unregister_all(self, event_name: str | None = None) -> None:
        """Clear handlers for event_name, or for every event when omitted."""
        ...

    def notify(self, event: DomainEvent[Any]) -> list[HandlerFailure]:
        """Invoke every handler registered for event.name, in order.

        Returns:
            Failures collected under the ISOLATE policy; always empty under
            FAIL_FAST (the first failure propagates instead).
        """
        ...

    @property
    def event_handlers(
        self,
    ) -> Mapping[str, tuple[EventHandlerProtocol[Any], ...]]:
        """Read-only snapshot of the registry."""
        ...
