"""Dependency factories (composition root).

Application-scoped singletons for infrastructure (logger, database) and an
uncached factory for the event dispatcher. Each caller constructs and owns
its dispatcher and passes it to the command handlers that publish events.

Usage:
    from storefront.core.container import (
        create_event_dispatcher,
        get_logger,
        register_default_handlers,
    )

    dispatcher = create_event_dispatcher()
    register_default_handlers(dispatcher)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from storefront.core.config import get_settings
from storefront.core.enums import HandlerFailurePolicy

if TYPE_CHECKING:
    from storefront.domain.protocols.event_handler_protocol import (
        EventHandlerProtocol,
    )
    from storefront.domain.protocols.logger_protocol import LoggerProtocol
    from storefront.infrastructure.events.event_dispatcher import EventDispatcher
    from storefront.infrastructure.persistence.database import Database


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    JSON rendering when LOG_JSON is set, colored console output otherwise.

    Returns:
        Logger implementing LoggerProtocol.
    """
    from storefront.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.log_json, level=settings.log_level)


@lru_cache()
def get_database() -> "Database":
    """Get database singleton (app-scoped).

    Returns:
        Database bound to DATABASE_URL.
    """
    from storefront.infrastructure.persistence.database import Database

    settings = get_settings()
    return Database(database_url=settings.database_url, echo=settings.db_echo)


def create_event_dispatcher(
    logger: "LoggerProtocol | None" = None,
    failure_policy: HandlerFailurePolicy | None = None,
) -> "EventDispatcher":
    """Construct a new, empty event dispatcher.

    Args:
        logger: Logger for the dispatcher. Defaults to get_logger().
        failure_policy: Handler failure policy. Defaults to
            EVENT_FAILURE_POLICY from settings.

    Returns:
        A fresh EventDispatcher owned by the caller.
    """
    from storefront.infrastructure.events.event_dispatcher import EventDispatcher

    if failure_policy is None:
        failure_policy = get_settings().event_failure_policy

    return EventDispatcher(
        logger=logger if logger is not None else get_logger(),
        failure_policy=failure_policy,
    )


def default_handlers(
    logger: "LoggerProtocol",
) -> dict[str, list["EventHandlerProtocol"]]:
    """Default handler set per registered event name, in invocation order.

    Args:
        logger: Logger injected into every handler.

    Returns:
        Mapping of event name to handler instances.
    """
    from storefront.domain.events.customer_events import (
        CustomerAddressChanged,
        CustomerCreated,
    )
    from storefront.domain.events.product_events import ProductCreated
    from storefront.infrastructure.events.handlers import (
        FirstCustomerCreatedLogHandler,
        NotifyWhenAddressChangedHandler,
        SecondCustomerCreatedLogHandler,
        SendEmailWhenProductIsCreatedHandler,
    )

    return {
        CustomerCreated.event_name: [
            FirstCustomerCreatedLogHandler(logger),
            SecondCustomerCreatedLogHandler(logger),
        ],
        CustomerAddressChanged.event_name: [NotifyWhenAddressChangedHandler(logger)],
        ProductCreated.event_name: [SendEmailWhenProductIsCreatedHandler(logger)],
    }


def register_default_handlers(
    dispatcher: "EventDispatcher",
    logger: "LoggerProtocol | None" = None,
) -> None:
    """Subscribe the default handlers for every event in EVENT_REGISTRY.

    Args:
        dispatcher: Dispatcher to wire.
        logger: Logger for the handlers. Defaults to get_logger().

    Raises:
        ValueError: If a registry event has no default handlers.
    """
    from storefront.domain.events.registry import EVENT_REGISTRY

    handlers_by_event = default_handlers(logger if logger is not None else get_logger())

    for metadata in EVENT_REGISTRY:
        handlers = handlers_by_event.get(metadata.event_name)
        if not handlers:
            raise ValueError(f"No default handlers for event: {metadata.event_name}")
        for handler in handlers:
            dispatcher.register(metadata.event_name, handler)
