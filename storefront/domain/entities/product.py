"""Product domain entity.

Usage:
    from decimal import Decimal
    from storefront.domain.entities import Product

    product = Product(id="123", name="Product 1", price=Decimal("10"))
    product.change_price(Decimal("12.50"))
"""

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.types import to_price


@dataclass
class Product:
    """Product available for sale.

    Attributes:
        id: Unique product identifier.
        name: Product name (non-empty).
        price: Unit price (Decimal, never negative, whole cents).
    """

    id: str
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        """Validate product after initialization.

        Raises:
            ValueError: If id or name is empty, or price is negative or
                has more than two decimal places.
        """
        if not self.id or not self.id.strip():
            raise ValueError("Id is required")

        if not self.name or not self.name.strip():
            raise ValueError("Name is required")

        self.price = to_price(self.price)

    def change_name(self, name: str) -> None:
        """Rename the product.

        Raises:
            ValueError: If name is empty.
        """
        if not name or not name.strip():
            raise ValueError("Name is required")
        self.name = name

    def change_price(self, price: Decimal | int | float) -> None:
        """Change the unit price.

        Raises:
            ValueError: If price is negative, not a number, or finer
                than a cent.
        """
        self.price = to_price(price)
