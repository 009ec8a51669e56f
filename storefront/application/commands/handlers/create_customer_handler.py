"""CreateCustomer command handler.

Flow:
1. Reject duplicate ids (ConflictError)
2. Build Customer entity (ValidationError on invariant violation)
3. Persist through CustomerRepository
4. Notify CustomerCreated
5. Return Success(customer_id)

Handler exceptions raised during notify() propagate under the dispatcher's
FAIL_FAST policy; the customer is already persisted at that point.
"""

from storefront.application.commands.customer_commands import CreateCustomer
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError, DomainError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.customer import Customer
from storefront.domain.events.customer_events import (
    CustomerCreated,
    CustomerCreatedData,
)
from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
)


class CreateCustomerHandler:
    """Handler for CreateCustomer command."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        dispatcher: EventDispatcherProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            customer_repo: Customer repository for persistence.
            dispatcher: Event dispatcher for CustomerCreated.
        """
        self._customer_repo = customer_repo
        self._dispatcher = dispatcher

    async def handle(self, cmd: CreateCustomer) -> Result[str, DomainError]:
        """Handle CreateCustomer.

        Returns:
            Success(customer_id) on success.
            Failure(ConflictError) if the id is taken.
            Failure(ValidationError) if the customer data is invalid.
        """
        if await self._customer_repo.find(cmd.customer_id) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.CUSTOMER_ALREADY_EXISTS,
                    message=f"Customer {cmd.customer_id} already exists",
                    resource_type="Customer",
                )
            )

        try:
            customer = Customer(id=cmd.customer_id, name=cmd.name, address=cmd.address)
        except ValueError as e:
            return Failure(
                error=ValidationError(code=ErrorCode.VALIDATION_FAILED, message=str(e))
            )

        await self._customer_repo.create(customer)

        self._dispatcher.notify(
            CustomerCreated(
                event_data=CustomerCreatedData(id=customer.id, name=customer.name)
            )
        )

        return Success(value=customer.id)
