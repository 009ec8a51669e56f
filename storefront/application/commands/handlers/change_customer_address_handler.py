"""ChangeCustomerAddress command handler.

Flow:
1. Load customer (NotFoundError if missing)
2. Replace address on the entity
3. Persist through CustomerRepository
4. Notify CustomerAddressChanged with id, name, and new address
5. Return Success(None)
"""

from storefront.application.commands.customer_commands import ChangeCustomerAddress
from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError, NotFoundError
from storefront.core.result import Failure, Result, Success
from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerAddressChangedData,
)
from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
)


class ChangeCustomerAddressHandler:
    """Handler for ChangeCustomerAddress command."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        dispatcher: EventDispatcherProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._dispatcher = dispatcher

    async def handle(self, cmd: ChangeCustomerAddress) -> Result[None, DomainError]:
        """Handle ChangeCustomerAddress.

        Returns:
            Success(None) on success.
            Failure(NotFoundError) if the customer doesn't exist.
        """
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

        customer.change_address(cmd.address)
        await self._customer_repo.update(customer)

        self._dispatcher.notify(
            CustomerAddressChanged(
                event_data=CustomerAddressChangedData(
                    id=customer.id,
                    name=customer.name,
                    address=cmd.address,
                )
            )
        )

        return Success(value=None)
