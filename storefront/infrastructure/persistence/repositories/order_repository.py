"""OrderRepository - SQLAlchemy implementation of OrderRepository protocol.

Adapter for hexagonal architecture.
Maps between the domain Order aggregate (order + items) and the
OrderModel/OrderItemModel tables. The stored total is recomputed from the
entity on every write.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities.order import Order
from storefront.domain.entities.order_item import OrderItem
from storefront.infrastructure.persistence.models.order import (
    OrderItemModel,
    OrderModel,
)


class OrderRepository:
    """SQLAlchemy implementation of OrderRepository protocol.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = OrderRepository(session)
        ...     await repo.create(order)
        ...     found = await repo.find(order.id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, entity: Order) -> None:
        """Insert order and items.

        Raises:
            IntegrityError: If the order id exists, or the customer or a
                product is missing (foreign keys).
        """
        model = OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
            items=[self._to_item_model(item, entity.id) for item in entity.items],
        )
        self._session.add(model)
        await self._session.flush()

    async def update(self, entity: Order) -> None:
        """Update customer and total, and replace the item set.

        Old items are deleted before new ones are inserted, so an item id
        may be reused across the replacement.

        Raises:
            NoResultFound: If the order doesn't exist.
        """
        stmt = select(OrderModel).where(OrderModel.id == entity.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one()

        model.customer_id = entity.customer_id
        model.total = entity.total()

        model.items.clear()
        await self._session.flush()

        model.items.extend(
            self._to_item_model(item, entity.id) for item in entity.items
        )
        await self._session.flush()

    async def find(self, order_id: str) -> Order | None:
        """Find order by id.

        Returns:
            Order with items if found, None otherwise.
        """
        stmt = select(OrderModel).where(OrderModel.id == order_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_all(self) -> list[Order]:
        """List all orders with items, ordered by id."""
        stmt = select(OrderModel).order_by(OrderModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            customer_id=model.customer_id,
            items=[
                OrderItem(
                    id=item.id,
                    name=item.name,
                    price=item.price,
                    product_id=item.product_id,
                    quantity=item.quantity,
                )
                for item in model.items
            ],
        )

    def _to_item_model(self, item: OrderItem, order_id: str) -> OrderItemModel:
        return OrderItemModel(
            id=item.id,
            order_id=order_id,
            product_id=item.product_id,
            name=item.name,
            price=item.price,
            quantity=item.quantity,
        )
