"""In-process event dispatcher.

This module implements EventDispatcherProtocol with a dictionary-based
registry (event name → ordered list of handlers). notify() runs handlers
synchronously in registration order; there is no queue, no concurrency,
and no persistence.

Architecture:
    - Implements EventDispatcherProtocol (hexagonal adapter pattern)
    - Explicitly constructed and owned; passed to the services that publish
    - Failure policy chosen at construction (FAIL_FAST default, ISOLATE opt-in)
    - Structured logging of dispatch and handler failures

Usage:
    >>> dispatcher = EventDispatcher(logger=get_logger())
    >>> dispatcher.register("CustomerCreated", FirstCustomerCreatedLogHandler(logger))
    >>> dispatcher.register("CustomerCreated", SecondCustomerCreatedLogHandler(logger))
    >>> dispatcher.notify(CustomerCreated(event_data=CustomerCreatedData(id="1", name="A")))
    >>> # First handler runs, then second
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from storefront.core.enums import HandlerFailurePolicy
from storefront.domain.events.base_event import DomainEvent
from storefront.domain.protocols.event_dispatcher_protocol import HandlerFailure
from storefront.domain.protocols.event_handler_protocol import EventHandlerProtocol
from storefront.domain.protocols.logger_protocol import LoggerProtocol


class EventDispatcher:
    """Synchronous publish/subscribe registry for domain events.

    Thread Safety:
        - NOT thread-safe (single-threaded, in-process design)

    Attributes:
        _handlers: Mapping of event name to handlers, in registration order.
        _logger: Logger for dispatch tracing and handler failures.
        _failure_policy: What notify() does when a handler raises.

    Example:
        >>> dispatcher = EventDispatcher(
        ...     logger=logger, failure_policy=HandlerFailurePolicy.ISOLATE
        ... )
        >>> dispatcher.register("ProductCreated", SendEmailWhenProductIsCreatedHandler(logger))
        >>> failures = dispatcher.notify(event)
        >>> # failures lists HandlerFailure records; all handlers still ran

    Design Decisions:
        - **Ordered**: Handlers run in registration order
        - **Duplicates allowed**: Same handler registered twice runs twice
        - **Fail-fast default**: First handler failure propagates to caller
        - **Identity removal**: unregister() matches the handler object itself
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        failure_policy: HandlerFailurePolicy = HandlerFailurePolicy.FAIL_FAST,
    ) -> None:
        """Initialize an empty dispatcher.

        Args:
            logger: Logger for dispatch tracing (debug) and handler
                failures (warning).
            failure_policy: FAIL_FAST propagates the first handler exception;
                ISOLATE runs every handler and returns the failures.
        """
        self._handlers: dict[str, list[EventHandlerProtocol[Any]]] = {}
        self._logger = logger
        self._failure_policy = failure_policy

    @property
    def failure_policy(self) -> HandlerFailurePolicy:
        return self._failure_policy

    @property
    def event_handlers(
        self,
    ) -> Mapping[str, tuple[EventHandlerProtocol[Any], ...]]:
        """Read-only snapshot of the registry.

        Event names whose handler list was emptied by unregister() still
        appear with an empty tuple; unregister_all() removes the name.
        """
        return MappingProxyType(
            {name: tuple(handlers) for name, handlers in self._handlers.items()}
        )

    def handlers_for(self, event_name: str) -> tuple[EventHandlerProtocol[Any], ...]:
        """Handlers registered for event_name, in invocation order."""
        return tuple(self._handlers.get(event_name, ()))

    def register(self, event_name: str, handler: EventHandlerProtocol[Any]) -> None:
        """Append handler to the list for event_name.

        The list is created on first registration. Registering the same
        handler again is allowed and makes notify() call it again.

        Args:
            event_name: Routing key (DomainEvent.event_name of the target event).
            handler: Object with a handle(event) method.
        """
        self._handlers.setdefault(event_name, []).append(handler)

    def unregister(self, event_name: str, handler: EventHandlerProtocol[Any]) -> None:
        """Remove the first registration of handler under event_name.

        Matching is by identity. Unknown event names and handlers that
        were never registered are ignored.

        Args:
            event_name: Routing key.
            handler: The exact handler object previously registered.
        """
        handlers = self._handlers.get(event_name)
        if not handlers:
            return

        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                return

    def unregister_all(self, event_name: str | None = None) -> None:
        """Clear registrations.

        Args:
            event_name: Event whose handlers are removed. When None, every
                event's handlers are removed.
        """
        if event_name is None:
            self._handlers.clear()
            return

        self._handlers.pop(event_name, None)

    def notify(self, event: DomainEvent[Any]) -> list[HandlerFailure]:
        """Invoke every handler registered for event.name.

        Handlers run synchronously in registration order. The handler list
        is snapshotted first, so registrations made by a handler during
        dispatch take effect on the next notify().

        Args:
            event: Event to dispatch.

        Returns:
            HandlerFailure records collected under ISOLATE. Empty under
            FAIL_FAST, and empty when no handlers are registered.

        Raises:
            Exception: Under FAIL_FAST, the first handler exception, after
                which the remaining handlers are skipped.
        """
        handlers = self.handlers_for(event.name)
        if not handlers:
            return []

        self._logger.debug(
            "event_dispatching",
            event_name=event.name,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        failures: list[HandlerFailure] = []
        for handler in handlers:
            try:
                handler.handle(event)
            except Exception as exc:
                handler_name = type(handler).__name__
                self._logger.warning(
                    "event_handler_failed",
                    event_name=event.name,
                    event_id=str(event.event_id),
                    handler_name=handler_name,
                    error_type=type(exc).__name__,
                    error_message=str(exc),
                    failure_policy=self._failure_policy.value,
                )
                if self._failure_policy is HandlerFailurePolicy.FAIL_FAST:
                    raise
                failures.append(
                    HandlerFailure(
                        event_name=event.name,
                        handler_name=handler_name,
                        error=exc,
                    )
                )

        return failures
