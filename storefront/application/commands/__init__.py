"""Commands (write operations)."""

from storefront.application.commands.customer_commands import (
    ChangeCustomerAddress,
    CreateCustomer,
)
from storefront.application.commands.order_commands import OrderLine, PlaceOrder
from storefront.application.commands.product_commands import CreateProduct

__all__ = [
    "ChangeCustomerAddress",
    "CreateCustomer",
    "CreateProduct",
    "OrderLine",
    "PlaceOrder",
]
