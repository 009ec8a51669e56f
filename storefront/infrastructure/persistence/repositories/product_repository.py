"""ProductRepository - SQLAlchemy implementation of ProductRepository protocol."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities.product import Product
from storefront.infrastructure.persistence.models.product import ProductModel


class ProductRepository:
    """SQLAlchemy implementation of ProductRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, entity: Product) -> None:
        """Insert a new product.

        Raises:
            IntegrityError: If a product with the same id exists.
        """
        self._session.add(
            ProductModel(id=entity.id, name=entity.name, price=entity.price)
        )
        await self._session.flush()

    async def update(self, entity: Product) -> None:
        """Persist name and price.

        Raises:
            NoResultFound: If the product doesn't exist.
        """
        stmt = select(ProductModel).where(ProductModel.id == entity.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one()

        model.name = entity.name
        model.price = entity.price
        await self._session.flush()

    async def find(self, product_id: str) -> Product | None:
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def find_all(self) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    def _to_domain(self, model: ProductModel) -> Product:
        return Product(id=model.id, name=model.name, price=model.price)
