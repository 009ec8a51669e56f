"""Outcome of a storefront command.

Command handlers never raise for expected business outcomes (duplicate id,
unknown customer, invalid price). They return ``Success`` with the created
id or order, or ``Failure`` carrying a DomainError. Infrastructure errors
and FAIL_FAST event handler exceptions still propagate.

Usage:
    result = await CreateCustomerHandler(repo, dispatcher).handle(
        CreateCustomer(customer_id="c1", name="Customer 1")
    )
    match result:
        case Success(value=customer_id):
            logger.info("customer_registered", customer_id=customer_id)
        case Failure(error=NotFoundError() | ConflictError() as error):
            logger.warning("customer_rejected", code=error.code.value)
        case Failure(error=error):
            logger.warning("customer_invalid", reason=error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Command completed.

    Attributes:
        value: Id of the created customer/product, the placed Order, or
            None for updates.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Command rejected; nothing was persisted or notified.

    Attributes:
        error: Why the command was rejected (DomainError subclass).
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
