"""Product domain service."""

from decimal import Decimal

from storefront.domain.entities.product import Product
from storefront.domain.types import CENTS, to_amount


class ProductService:
    """Stateless product operations."""

    @staticmethod
    def increase_price(
        products: list[Product], percentage: Decimal | int | float
    ) -> list[Product]:
        """Raise every product's price by a percentage.

        New price = price * (1 + percentage / 100), quantized to cents.

        Args:
            products: Products to update in place.
            percentage: Increase in percent (e.g., 100 doubles the price).

        Returns:
            The same products, for chaining.

        Raises:
            ValueError: If the resulting price would be negative.
        """
        factor = Decimal("1") + to_amount(percentage, "percentage") / Decimal("100")
        for product in products:
            product.change_price((product.price * factor).quantize(CENTS))
        return products
