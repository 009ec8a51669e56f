"""Product event handlers."""

from storefront.domain.events.product_events import ProductCreated
from storefront.domain.protocols.logger_protocol import LoggerProtocol


class SendEmailWhenProductIsCreatedHandler:
    """Announces a new product.

    There is no mail transport; the notification is the log line itself.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: ProductCreated) -> None:
        data = event.event_data
        self._logger.info(
            "product_created_email_sent",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            product_id=data.id,
            product_name=data.name,
            price=str(data.price),
        )
