"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from storefront.infrastructure.persistence.models.customer import CustomerModel
from storefront.infrastructure.persistence.models.order import (
    OrderItemModel,
    OrderModel,
)
from storefront.infrastructure.persistence.models.product import ProductModel

__all__ = [
    "CustomerModel",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
]
