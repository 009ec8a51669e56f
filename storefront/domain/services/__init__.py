"""Domain services."""

from storefront.domain.services.order_service import OrderService
from storefront.domain.services.product_service import ProductService

__all__ = ["OrderService", "ProductService"]
