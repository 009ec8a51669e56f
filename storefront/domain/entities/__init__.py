"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from storefront.domain.entities.customer import Customer
from storefront.domain.entities.order import Order
from storefront.domain.entities.order_item import OrderItem
from storefront.domain.entities.product import Product

__all__ = [
    "Customer",
    "Order",
    "OrderItem",
    "Product",
]
