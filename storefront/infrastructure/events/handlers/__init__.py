"""Event handlers (one capability: handle(event) -> None)."""

from storefront.infrastructure.events.handlers.customer_event_handlers import (
    FirstCustomerCreatedLogHandler,
    NotifyWhenAddressChangedHandler,
    SecondCustomerCreatedLogHandler,
)
from storefront.infrastructure.events.handlers.product_event_handlers import (
    SendEmailWhenProductIsCreatedHandler,
)

__all__ = [
    "FirstCustomerCreatedLogHandler",
    "NotifyWhenAddressChangedHandler",
    "SecondCustomerCreatedLogHandler",
    "SendEmailWhenProductIsCreatedHandler",
]
