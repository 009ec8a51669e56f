"""Event dispatching infrastructure."""

from storefront.infrastructure.events.event_dispatcher import EventDispatcher

__all__ = ["EventDispatcher"]
