"""Customer database model.

Address fields are flattened into nullable columns; a customer without an
address stores NULL in all four.
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseModel


class CustomerModel(BaseModel):
    """Customer row.

    Fields:
        id: Customer id (primary key, assigned by the domain)
        name: Customer name
        street, number, zipcode, city: Address columns (nullable)
        active: Whether the customer is active
        reward_points: Accumulated reward points
    """

    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(32), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reward_points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
