"""Customer event handlers.

Each handler reacts to one customer event by writing a structured log line.

Log Levels:
    - INFO: all customer events (normal operations)

Usage:
    >>> logger = get_logger()
    >>> dispatcher.register(CustomerCreated.event_name, FirstCustomerCreatedLogHandler(logger))
    >>> dispatcher.register(CustomerCreated.event_name, SecondCustomerCreatedLogHandler(logger))
    >>> dispatcher.register(
    ...     CustomerAddressChanged.event_name, NotifyWhenAddressChangedHandler(logger)
    ... )
"""

from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerCreated,
)
from storefront.domain.protocols.logger_protocol import LoggerProtocol


class FirstCustomerCreatedLogHandler:
    """First of the two CustomerCreated log handlers."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: CustomerCreated) -> None:
        self._logger.info(
            "customer_created_first_handler",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            customer_id=event.event_data.id,
        )


class SecondCustomerCreatedLogHandler:
    """Second of the two CustomerCreated log handlers."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: CustomerCreated) -> None:
        self._logger.info(
            "customer_created_second_handler",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            customer_id=event.event_data.id,
        )


class NotifyWhenAddressChangedHandler:
    """Logs the customer's new address.

    Example output (console renderer):
        customer_address_changed  customer_id=1 customer_name=A
        address='Street 1, 1, Zipcode 1 City 1'
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: CustomerAddressChanged) -> None:
        data = event.event_data
        self._logger.info(
            "customer_address_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            customer_id=data.id,
            customer_name=data.name,
            address=str(data.address),
        )
