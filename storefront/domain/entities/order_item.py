"""OrderItem domain entity.

A line of an Order: a snapshot of a product's name and price at ordering
time, plus the quantity ordered.
"""

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.types import to_price


@dataclass
class OrderItem:
    """Order line item.

    Attributes:
        id: Unique item identifier.
        name: Product name at ordering time.
        price: Unit price at ordering time (never negative, whole cents).
        product_id: Product this line refers to.
        quantity: Units ordered (greater than zero).
    """

    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        """Validate item after initialization.

        Raises:
            ValueError: If ids or name are empty, price is negative or finer
                than a cent, or quantity is not positive.
        """
        if not self.id or not self.id.strip():
            raise ValueError("Id is required")

        if not self.name or not self.name.strip():
            raise ValueError("Name is required")

        if not self.product_id or not self.product_id.strip():
            raise ValueError("ProductId is required")

        self.price = to_price(self.price)

        if self.quantity <= 0:
            raise ValueError("Quantity must be greater than zero")

    @property
    def subtotal(self) -> Decimal:
        """price * quantity."""
        return self.price * self.quantity
