"""Order commands (write operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class OrderLine:
    """One requested line of a PlaceOrder command.

    Attributes:
        item_id: Id of the order item to create.
        product_id: Product being ordered.
        quantity: Units ordered.
    """

    item_id: str
    product_id: str
    quantity: int


@dataclass(frozen=True, kw_only=True)
class PlaceOrder:
    """Place an order for a customer.

    Product names and prices are copied from the catalog at placement time.

    Attributes:
        order_id: Id of the new order.
        customer_id: Customer placing the order.
        lines: Requested lines (at least one).
    """

    order_id: str
    customer_id: str
    lines: tuple[OrderLine, ...]
