"""Order domain service.

Operations spanning Order and Customer that belong to neither entity alone.

Usage:
    order = OrderService.place_order("o1", customer, [item])
    customer.reward_points  # increased by half the order total
"""

from collections.abc import Iterable
from decimal import ROUND_DOWN, Decimal

from storefront.domain.entities.customer import Customer
from storefront.domain.entities.order import Order
from storefront.domain.entities.order_item import OrderItem


class OrderService:
    """Stateless order operations."""

    @staticmethod
    def place_order(
        order_id: str, customer: Customer, items: list[OrderItem]
    ) -> Order:
        """Create an order for customer and award reward points.

        Reward points are half the order total, rounded down to a whole
        point.

        Args:
            order_id: Id of the new order.
            customer: Customer placing the order (mutated: reward points).
            items: Order lines.

        Returns:
            The new Order.

        Raises:
            ValueError: If items is empty or do not form a valid order
                (for example, repeated item ids).
        """
        if not items:
            raise ValueError("Order must have at least one item")

        order = Order(id=order_id, customer_id=customer.id, items=items)
        points = (order.total() / 2).to_integral_value(rounding=ROUND_DOWN)
        customer.add_reward_points(int(points))
        return order

    @staticmethod
    def total(orders: Iterable[Order]) -> Decimal:
        """Sum of the totals of orders."""
        return sum((order.total() for order in orders), Decimal("0"))
