"""Domain protocols (ports).

Infrastructure provides the adapters; the domain and application layers
depend only on these interfaces.
"""

from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
    HandlerFailure,
)
from storefront.domain.protocols.event_handler_protocol import EventHandlerProtocol
from storefront.domain.protocols.logger_protocol import LoggerProtocol
from storefront.domain.protocols.order_repository import OrderRepository
from storefront.domain.protocols.product_repository import ProductRepository

__all__ = [
    "CustomerRepository",
    "EventDispatcherProtocol",
    "EventHandlerProtocol",
    "HandlerFailure",
    "LoggerProtocol",
    "OrderRepository",
    "ProductRepository",
]
