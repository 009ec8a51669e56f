"""Product commands (write operations)."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, kw_only=True)
class CreateProduct:
    """Create a new product.

    Attributes:
        product_id: Id of the new product.
        name: Product name.
        price: Unit price.
    """

    product_id: str
    name: str
    price: Decimal
