"""Order domain entity.

An Order belongs to one customer and holds at least one OrderItem. The
order total is always the sum of its item subtotals; it is never stored
independently on the entity.

Usage:
    from decimal import Decimal
    from storefront.domain.entities import Order, OrderItem

    item = OrderItem(id="1", name="Product 1", price=Decimal("10"), product_id="123", quantity=2)
    order = Order(id="123", customer_id="123", items=[item])
    order.total()  # Decimal("20")
"""

from dataclasses import dataclass, field
from decimal import Decimal

from storefront.domain.entities.order_item import OrderItem


@dataclass
class Order:
    """Customer order.

    Attributes:
        id: Unique order identifier.
        customer_id: Customer who placed the order.
        items: Order lines (at least one).
    """

    id: str
    customer_id: str
    items: list[OrderItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate order after initialization.

        Raises:
            ValueError: If ids are empty, there are no items, or two items
                share an id.
        """
        self.items = list(self.items)
        self._validate()

    def _validate(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("Id is required")

        if not self.customer_id or not self.customer_id.strip():
            raise ValueError("CustomerId is required")

        if not self.items:
            raise ValueError("Items are required")

        # OrderItem enforces quantity > 0 on construction; items may have
        # been mutated since.
        if any(item.quantity <= 0 for item in self.items):
            raise ValueError("Quantity must be greater than zero")

        item_ids = [item.id for item in self.items]
        if len(set(item_ids)) != len(item_ids):
            raise ValueError("Item ids must be unique within an order")

    def total(self) -> Decimal:
        """Sum of item subtotals."""
        return sum((item.subtotal for item in self.items), Decimal("0"))

    def change_customer(self, customer_id: str) -> None:
        """Reassign the order to another customer.

        Raises:
            ValueError: If customer_id is empty.
        """
        if not customer_id or not customer_id.strip():
            raise ValueError("CustomerId is required")
        self.customer_id = customer_id

    def change_items(self, items: list[OrderItem]) -> None:
        """Replace all order lines.

        Raises:
            ValueError: If items is empty, any quantity is not positive, or
                item ids repeat.
        """
        previous = self.items
        self.items = list(items)
        try:
            self._validate()
        except ValueError:
            self.items = previous
            raise
