"""PlaceOrder command handler.

Flow:
1. Reject duplicate order ids (ConflictError)
2. Load customer and every ordered product (NotFoundError if missing)
3. Build order items from catalog name/price (ValidationError on bad quantity)
4. OrderService.place_order (awards reward points to the customer)
5. Persist the order and the customer's new reward points
6. Return Success(order)
"""

from storefront.application.commands.order_commands import PlaceOrder
from storefront.core.enums import ErrorCode
from storefront.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.order import Order
from storefront.domain.entities.order_item import OrderItem
from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.order_repository import OrderRepository
from storefront.domain.protocols.product_repository import ProductRepository
from storefront.domain.services.order_service import OrderService


class PlaceOrderHandler:
    """Handler for PlaceOrder command."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._order_repo = order_repo

    async def handle(self, cmd: PlaceOrder) -> Result[Order, DomainError]:
        """Handle PlaceOrder.

        Returns:
            Success(order) on success.
            Failure(ConflictError) if the order id is taken.
            Failure(NotFoundError) if the customer or a product is missing.
            Failure(ValidationError) if there are no lines or a quantity is invalid.
        """
        if await self._order_repo.find(cmd.order_id) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ORDER_ALREADY_EXISTS,
                    message=f"Order {cmd.order_id} already exists",
                    resource_type="Order",
                )
            )

        customer = await self._customer_repo.find(cmd.customer_id)
        if customer is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.CUSTOMER_NOT_FOUND,
                    message="Customer not found",
                    resource_type="Customer",
                    resource_id=cmd.customer_id,
                )
            )

        items: list[OrderItem] = []
        for line in cmd.lines:
            product = await self._product_repo.find(line.product_id)
            if product is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.PRODUCT_NOT_FOUND,
                        message="Product not found",
                        resource_type="Product",
                        resource_id=line.product_id,
                    )
                )
            try:
                items.append(
                    OrderItem(
                        id=line.item_id,
                        name=product.name,
                        price=product.price,
                        product_id=product.id,
                        quantity=line.quantity,
                    )
                )
            except ValueError as e:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_ORDER, message=str(e), field="quantity"
                    )
                )

        try:
            order = OrderService.place_order(cmd.order_id, customer, items)
        except ValueError as e:
            return Failure(
                error=ValidationError(code=ErrorCode.INVALID_ORDER, message=str(e))
            )

        await self._order_repo.create(order)
        await self._customer_repo.update(customer)

        return Success(value=order)
