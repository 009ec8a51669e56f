"""Customer domain entity.

Represents a buyer in the storefront. Customers start inactive and can only
be activated once they have an address. Reward points accumulate as orders
are placed (see OrderService).

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Mutable, identified by id
    - Domain events are raised by the application layer, not the entity

Usage:
    from storefront.domain.entities import Customer
    from storefront.domain.value_objects import Address

    customer = Customer(id="123", name="Customer 1")
    customer.change_address(
        Address(street="Street 1", number=1, zip_code="Zipcode 1", city="City 1")
    )
    customer.activate()
"""

from dataclasses import dataclass

from storefront.domain.value_objects.address import Address


@dataclass
class Customer:
    """Customer entity.

    Attributes:
        id: Unique customer identifier.
        name: Customer display name (non-empty).
        address: Current postal address, if any.
        active: Whether the customer is active.
        reward_points: Accumulated reward points (never negative).
    """

    id: str
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self) -> None:
        """Validate customer after initialization.

        Raises:
            ValueError: If id or name is empty, or an active customer has
                no address, or reward points are negative.
        """
        self._validate()

    def _validate(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("Id is required")

        if not self.name or not self.name.strip():
            raise ValueError("Name is required")

        if self.active and self.address is None:
            raise ValueError("Address is mandatory to activate a customer")

        if self.reward_points < 0:
            raise ValueError("Reward points cannot be negative")

    # =========================================================================
    # Commands
    # =========================================================================

    def change_name(self, name: str) -> None:
        """Rename the customer.

        Raises:
            ValueError: If name is empty.
        """
        if not name or not name.strip():
            raise ValueError("Name is required")
        self.name = name

    def change_address(self, address: Address) -> None:
        """Replace the customer's address."""
        self.address = address

    def activate(self) -> None:
        """Activate the customer.

        Raises:
            ValueError: If the customer has no address.
        """
        if self.address is None:
            raise ValueError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        """Add reward points.

        Raises:
            ValueError: If points is negative.
        """
        if points < 0:
            raise ValueError("Reward points to add cannot be negative")
        self.reward_points += points

    # =========================================================================
    # Queries
    # =========================================================================

    def is_active(self) -> bool:
        return self.active
