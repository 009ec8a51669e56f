"""CustomerRepository - SQLAlchemy implementation of CustomerRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Customer entities and database CustomerModel.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities.customer import Customer
from storefront.domain.value_objects.address import Address
from storefront.infrastructure.persistence.models.customer import CustomerModel


class CustomerRepository:
    """SQLAlchemy implementation of CustomerRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).
    Writes are flushed, not committed; the session owner commits.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = CustomerRepository(session)
        ...     await repo.create(customer)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, entity: Customer) -> None:
        """Insert a new customer.

        Raises:
            IntegrityError: If a customer with the same id exists.
        """
        self._session.add(self._to_model(entity))
        await self._session.flush()

    async def update(self, entity: Customer) -> None:
        """Persist changes to an existing customer.

        Raises:
            NoResultFound: If the customer doesn't exist.
        """
        stmt = select(CustomerModel).where(CustomerModel.id == entity.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one()

        self._update_model(model, entity)
        await self._session.flush()

    async def find(self, customer_id: str) -> Customer | None:
        """Find customer by id.

        Returns:
            Customer entity if found, None otherwise.
        """
        model = await self._session.get(CustomerModel, customer_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def find_all(self) -> list[Customer]:
        """List all customers ordered by id."""
        stmt = select(CustomerModel).order_by(CustomerModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: CustomerModel) -> Customer:
        address: Address | None = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,  # type: ignore[arg-type]
                zip_code=model.zipcode,  # type: ignore[arg-type]
                city=model.city,  # type: ignore[arg-type]
            )

        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=model.active,
            reward_points=model.reward_points,
        )

    def _to_model(self, entity: Customer) -> CustomerModel:
        model = CustomerModel(id=entity.id)
        self._update_model(model, entity)
        return model

    def _update_model(self, model: CustomerModel, entity: Customer) -> None:
        """Copy mutable fields from entity onto model (id is immutable)."""
        address = entity.address
        model.name = entity.name
        model.street = address.street if address is not None else None
        model.number = address.number if address is not None else None
        model.zipcode = address.zip_code if address is not None else None
        model.city = address.city if address is not None else None
        model.active = entity.active
        model.reward_points = entity.reward_points
