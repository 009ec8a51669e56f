"""CreateProduct command handler.

Flow:
1. Reject duplicate ids (ConflictError)
2. Build Product entity (ValidationError on invariant violation)
3. Persist through ProductRepository
4. Notify ProductCreated
5. Return Success(product_id)
"""

from storefront.application.commands.product_commands import CreateProduct
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError, DomainError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.product import Product
from storefront.domain.events.product_events import ProductCreated, ProductCreatedData
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
)
from storefront.domain.protocols.product_repository import ProductRepository


class CreateProductHandler:
    """Handler for CreateProduct command."""

    def __init__(
        self,
        product_repo: ProductRepository,
        dispatcher: EventDispatcherProtocol,
    ) -> None:
        self._product_repo = product_repo
        self._dispatcher = dispatcher

    async def handle(self, cmd: CreateProduct) -> Result[str, DomainError]:
        """Handle CreateProduct.

        Returns:
            Success(product_id) on success.
            Failure(ConflictError) if the id is taken.
            Failure(ValidationError) if name or price is invalid.
        """
        if await self._product_repo.find(cmd.product_id) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PRODUCT_ALREADY_EXISTS,
                    message=f"Product {cmd.product_id} already exists",
                    resource_type="Product",
                )
            )

        try:
            product = Product(id=cmd.product_id, name=cmd.name, price=cmd.price)
        except ValueError as e:
            code = (
                ErrorCode.INVALID_PRICE
                if "price" in str(e).lower()
                else ErrorCode.VALIDATION_FAILED
            )
            return Failure(error=ValidationError(code=code, message=str(e)))

        await self._product_repo.create(product)

        self._dispatcher.notify(
            ProductCreated(
                event_data=ProductCreatedData(
                    id=product.id, name=product.name, price=product.price
                )
            )
        )

        return Success(value=product.id)
