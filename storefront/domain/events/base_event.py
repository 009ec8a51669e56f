"""Base domain event class.

Domain events represent "things that happened" in the business domain and
are always named in past tense (e.g., CustomerCreated, ProductCreated).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Event name is a class-level constant; the dispatcher routes on it
    - occurred_at captured at construction time (UTC)
    - event_data carries the payload specific to the triggering change
    - Auto-generated event_id used for log correlation

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class CustomerCreated(DomainEvent[CustomerCreatedData]):
    ...     event_name: ClassVar[str] = "CustomerCreated"
    >>>
    >>> event = CustomerCreated(event_data=CustomerCreatedData(id="1", name="A"))
    >>> event.name
    'CustomerCreated'
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar, Generic, TypeVar
from uuid import UUID, uuid4

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent(Generic[T]):
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (CustomerCreated, NOT CreateCustomer)
        3. Be frozen dataclasses (immutable after creation)
        4. Set the event_name class constant (dispatcher routing key)

    Attributes:
        event_data: Payload describing the change (frozen dataclass).
        event_id: Unique identifier for this event instance.
        occurred_at: When the event occurred (UTC), captured at construction.

    Notes:
        - Events are published AFTER business logic succeeds (facts, not intents)
        - Events are discarded after dispatch (not persisted)
    """

    event_name: ClassVar[str] = "DomainEvent"

    event_data: T
    """Payload specific to the triggering change."""

    event_id: UUID = field(default_factory=uuid4)
    """Unique identifier for this event instance (log correlation)."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """Timestamp when the event occurred (UTC timezone)."""

    @property
    def name(self) -> str:
        """Routing key used by the event dispatcher."""
        return self.event_name
