"""Customer commands (write operations).

Commands represent intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments.
"""

from dataclasses import dataclass

from storefront.domain.value_objects.address import Address


@dataclass(frozen=True, kw_only=True)
class CreateCustomer:
    """Create a new customer.

    Attributes:
        customer_id: Id of the new customer.
        name: Customer name.
        address: Optional initial address.

    Example:
        >>> result = await handler.handle(CreateCustomer(customer_id="1", name="A"))
    """

    customer_id: str
    name: str
    address: Address | None = None


@dataclass(frozen=True, kw_only=True)
class ChangeCustomerAddress:
    """Replace a customer's address.

    Attributes:
        customer_id: Customer to update.
        address: The new address.
    """

    customer_id: str
    address: Address
