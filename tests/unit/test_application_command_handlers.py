"""Unit tests for command handlers.

Tests cover:
- CreateCustomerHandler: success, duplicate id, invalid name, event notified
- ChangeCustomerAddressHandler: success, missing customer, event payload
- CreateProductHandler: success, duplicate id, invalid price
- PlaceOrderHandler: success, reward points, missing customer/product,
  invalid quantity, empty order, duplicate order id

Architecture:
- Unit tests for application handlers (mocked dependencies)
- Mock repository protocols (AsyncMock) and dispatcher (Mock)
- Test handler logic, not persistence
"""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from storefront.application.commands import (
    ChangeCustomerAddress,
    CreateCustomer,
    CreateProduct,
    OrderLine,
    PlaceOrder,
)
from storefront.application.commands.handlers import (
    ChangeCustomerAddressHandler,
    CreateCustomerHandler,
    CreateProductHandler,
    PlaceOrderHandler,
)
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError, NotFoundError, ValidationError
from storefront.core.result import Failure, Success
from storefront.domain.events import (
    CustomerAddressChanged,
    CustomerCreated,
    ProductCreated,
)
from tests.conftest import create_address, create_customer, create_product


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def customer_repo():
    repo = AsyncMock()
    repo.find.return_value = None
    return repo


@pytest.fixture
def product_repo():
    repo = AsyncMock()
    repo.find.return_value = None
    return repo


@pytest.fixture
def order_repo():
    repo = AsyncMock()
    repo.find.return_value = None
    return repo


@pytest.fixture
def mock_dispatcher():
    dispatcher = Mock()
    dispatcher.notify.return_value = []
    return dispatcher


# =============================================================================
# CreateCustomerHandler
# =============================================================================


@pytest.mark.unit
class TestCreateCustomerHandler:
    async def test_create_customer_success_returns_id(
        self, customer_repo, mock_dispatcher
    ):
        # Arrange
        handler = CreateCustomerHandler(customer_repo, mock_dispatcher)

        # Act
        result = await handler.handle(CreateCustomer(customer_id="1", name="A"))

        # Assert
        assert isinstance(result, Success)
        assert result.value == "1"
        customer_repo.create.assert_awaited_once()
        created = customer_repo.create.call_args[0][0]
        assert created.id == "1"
        assert created.name == "A"
        assert created.address is None

    async def test_create_customer_notifies_customer_created(
        self, customer_repo, mock_dispatcher
    ):
        handler = CreateCustomerHandler(customer_repo, mock_dispatcher)

        await handler.handle(CreateCustomer(customer_id="1", name="A"))

        mock_dispatcher.notify.assert_called_once()
        event = mock_dispatcher.notify.call_args[0][0]
        assert isinstance(event, CustomerCreated)
        assert event.event_data.id == "1"
        assert event.event_data.name == "A"

    async def test_create_customer_with_address(self, customer_repo, mock_dispatcher):
        address = create_address()
        handler = CreateCustomerHandler(customer_repo, mock_dispatcher)

        await handler.handle(CreateCustomer(customer_id="1", name="A", address=address))

        assert customer_repo.create.call_args[0][0].address == address

    async def test_duplicate_id_returns_conflict(self, customer_repo, mock_dispatcher):
        customer_repo.find.return_value = create_customer("1")
        handler = CreateCustomerHandler(customer_repo, mock_dispatcher)

        result = await handler.handle(CreateCustomer(customer_id="1", name="A"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.CUSTOMER_ALREADY_EXISTS
        customer_repo.create.assert_not_called()
        mock_dispatcher.notify.assert_not_called()

    async def test_invalid_name_returns_validation_error(
        self, customer_repo, mock_dispatcher
    ):
        handler = CreateCustomerHandler(customer_repo, mock_dispatcher)

        result = await handler.handle(CreateCustomer(customer_id="1", name=""))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.message == "Name is required"
        customer_repo.create.assert_not_called()
        mock_dispatcher.notify.assert_not_called()

    async def test_handler_exception_propagates_after_persist(
        self, customer_repo, mock_dispatcher
    ):
        mock_dispatcher.notify.side_effect = RuntimeError("handler failed")
        handler = CreateCustomerHandler(customer_repo, mock_dispatcher)

        with pytest.raises(RuntimeError, match="handler failed"):
            await handler.handle(CreateCustomer(customer_id="1", name="A"))

        customer_repo.create.assert_awaited_once()


# =============================================================================
# ChangeCustomerAddressHandler
# =============================================================================


@pytest.mark.unit
class TestChangeCustomerAddressHandler:
    async def test_change_address_success(self, customer_repo, mock_dispatcher):
        customer = create_customer("1", "A")
        customer_repo.find.return_value = customer
        new_address = create_address("Street 2", 2)
        handler = ChangeCustomerAddressHandler(customer_repo, mock_dispatcher)

        result = await handler.handle(
            ChangeCustomerAddress(customer_id="1", address=new_address)
        )

        assert isinstance(result, Success)
        assert result.value is None
        assert customer.address == new_address
        customer_repo.update.assert_awaited_once_with(customer)

    async def test_change_address_notifies_with_new_address(
        self, customer_repo, mock_dispatcher
    ):
        customer_repo.find.return_value = create_customer("1", "A")
        new_address = create_address("Street 2", 2)
        handler = ChangeCustomerAddressHandler(customer_repo, mock_dispatcher)

        await handler.handle(ChangeCustomerAddress(customer_id="1", address=new_address))

        event = mock_dispatcher.notify.call_args[0][0]
        assert isinstance(event, CustomerAddressChanged)
        assert event.event_data.id == "1"
        assert event.event_data.name == "A"
        assert event.event_data.address == new_address

    async def test_missing_customer_returns_not_found(
        self, customer_repo, mock_dispatcher
    ):
        handler = ChangeCustomerAddressHandler(customer_repo, mock_dispatcher)

        result = await handler.handle(
            ChangeCustomerAddress(customer_id="missing", address=create_address())
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.CUSTOMER_NOT_FOUND
        assert result.error.resource_id == "missing"
        customer_repo.update.assert_not_called()
        mock_dispatcher.notify.assert_not_called()


# =============================================================================
# CreateProductHandler
# =============================================================================


@pytest.mark.unit
class TestCreateProductHandler:
    async def test_create_product_success(self, product_repo, mock_dispatcher):
        handler = CreateProductHandler(product_repo, mock_dispatcher)

        result = await handler.handle(
            CreateProduct(product_id="p1", name="Product 1", price=Decimal("10"))
        )

        assert isinstance(result, Success)
        assert result.value == "p1"
        product_repo.create.assert_awaited_once()
        event = mock_dispatcher.notify.call_args[0][0]
        assert isinstance(event, ProductCreated)
        assert event.event_data.price == Decimal("10")

    async def test_duplicate_id_returns_conflict(self, product_repo, mock_dispatcher):
        product_repo.find.return_value = create_product("p1")
        handler = CreateProductHandler(product_repo, mock_dispatcher)

        result = await handler.handle(
            CreateProduct(product_id="p1", name="Product 1", price=Decimal("10"))
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PRODUCT_ALREADY_EXISTS
        product_repo.create.assert_not_called()

    async def test_negative_price_returns_invalid_price(
        self, product_repo, mock_dispatcher
    ):
        handler = CreateProductHandler(product_repo, mock_dispatcher)

        result = await handler.handle(
            CreateProduct(product_id="p1", name="Product 1", price=Decimal("-1"))
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_PRICE
        product_repo.create.assert_not_called()
        mock_dispatcher.notify.assert_not_called()

    async def test_sub_cent_price_returns_invalid_price(
        self, product_repo, mock_dispatcher
    ):
        handler = CreateProductHandler(product_repo, mock_dispatcher)

        result = await handler.handle(
            CreateProduct(product_id="p1", name="Product 1", price=Decimal("10.005"))
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PRICE
        assert "2 decimal places" in result.error.message
        product_repo.create.assert_not_called()

    async def test_empty_name_returns_validation_failed(
        self, product_repo, mock_dispatcher
    ):
        handler = CreateProductHandler(product_repo, mock_dispatcher)

        result = await handler.handle(
            CreateProduct(product_id="p1", name="", price=Decimal("1"))
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED


# =============================================================================
# PlaceOrderHandler
# =============================================================================


@pytest.mark.unit
class TestPlaceOrderHandler:
    @pytest.fixture
    def catalog(self, product_repo):
        products = {
            "p1": create_product("p1", "Product 1", "10"),
            "p2": create_product("p2", "Product 2", "25"),
        }
        product_repo.find.side_effect = lambda product_id: products.get(product_id)
        return products

    @pytest.fixture
    def handler(self, customer_repo, product_repo, order_repo):
        return PlaceOrderHandler(customer_repo, product_repo, order_repo)

    async def test_place_order_success(self, handler, customer_repo, order_repo, catalog):
        customer = create_customer("c1")
        customer_repo.find.return_value = customer

        result = await handler.handle(
            PlaceOrder(
                order_id="o1",
                customer_id="c1",
                lines=(
                    OrderLine(item_id="i1", product_id="p1", quantity=2),
                    OrderLine(item_id="i2", product_id="p2", quantity=1),
                ),
            )
        )

        assert isinstance(result, Success)
        order = result.value
        assert order.id == "o1"
        assert order.customer_id == "c1"
        assert [item.name for item in order.items] == ["Product 1", "Product 2"]
        assert order.total() == Decimal("45")
        assert customer.reward_points == 22
        order_repo.create.assert_awaited_once_with(order)
        customer_repo.update.assert_awaited_once_with(customer)

    async def test_missing_customer_returns_not_found(self, handler, catalog):
        result = await handler.handle(
            PlaceOrder(
                order_id="o1",
                customer_id="missing",
                lines=(OrderLine(item_id="i1", product_id="p1", quantity=1),),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CUSTOMER_NOT_FOUND

    async def test_missing_product_returns_not_found(
        self, handler, customer_repo, order_repo, catalog
    ):
        customer_repo.find.return_value = create_customer("c1")

        result = await handler.handle(
            PlaceOrder(
                order_id="o1",
                customer_id="c1",
                lines=(OrderLine(item_id="i1", product_id="nope", quantity=1),),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.PRODUCT_NOT_FOUND
        assert result.error.resource_id == "nope"
        order_repo.create.assert_not_called()

    async def test_invalid_quantity_returns_invalid_order(
        self, handler, customer_repo, order_repo, catalog
    ):
        customer = create_customer("c1")
        customer_repo.find.return_value = customer

        result = await handler.handle(
            PlaceOrder(
                order_id="o1",
                customer_id="c1",
                lines=(OrderLine(item_id="i1", product_id="p1", quantity=0),),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ORDER
        assert result.error.field == "quantity"
        assert customer.reward_points == 0
        order_repo.create.assert_not_called()

    async def test_no_lines_returns_invalid_order(
        self, handler, customer_repo, order_repo
    ):
        customer_repo.find.return_value = create_customer("c1")

        result = await handler.handle(
            PlaceOrder(order_id="o1", customer_id="c1", lines=())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ORDER
        order_repo.create.assert_not_called()

    async def test_duplicate_order_id_returns_conflict(
        self, handler, customer_repo, order_repo
    ):
        order_repo.find.return_value = object()

        result = await handler.handle(
            PlaceOrder(
                order_id="o1",
                customer_id="c1",
                lines=(OrderLine(item_id="i1", product_id="p1", quantity=1),),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.ORDER_ALREADY_EXISTS
        customer_repo.find.assert_not_called()

    async def test_repeated_item_ids_return_invalid_order(
        self, handler, customer_repo, order_repo, catalog
    ):
        customer = create_customer("c1")
        customer_repo.find.return_value = customer

        result = await handler.handle(
            PlaceOrder(
                order_id="o1",
                customer_id="c1",
                lines=(
                    OrderLine(item_id="i1", product_id="p1", quantity=1),
                    OrderLine(item_id="i1", product_id="p2", quantity=1),
                ),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_ORDER
        assert "unique" in result.error.message
        assert customer.reward_points == 0
        order_repo.create.assert_not_called()
        customer_repo.update.assert_not_called()
