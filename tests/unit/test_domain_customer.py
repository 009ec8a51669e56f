"""Unit tests for the Customer entity.

Tests cover:
- Creation defaults and validation
- Name and address changes
- Activation rules (address mandatory)
- Reward points
"""

import pytest

from storefront.domain.entities.customer import Customer
from tests.conftest import create_address, create_customer


@pytest.mark.unit
class TestCustomerCreation:
    def test_new_customer_defaults(self):
        customer = Customer(id="123", name="Customer 1")

        assert customer.address is None
        assert customer.is_active() is False
        assert customer.reward_points == 0

    @pytest.mark.parametrize(
        ("customer_id", "name", "message"),
        [
            ("", "John", "Id is required"),
            ("123", "", "Name is required"),
            ("123", "  ", "Name is required"),
        ],
    )
    def test_invalid_identity_rejected(self, customer_id, name, message):
        with pytest.raises(ValueError, match=message):
            Customer(id=customer_id, name=name)

    def test_active_without_address_rejected(self):
        with pytest.raises(ValueError, match="Address is mandatory"):
            Customer(id="123", name="John", active=True)

    def test_negative_reward_points_rejected(self):
        with pytest.raises(ValueError, match="Reward points cannot be negative"):
            Customer(id="123", name="John", reward_points=-1)


@pytest.mark.unit
class TestCustomerCommands:
    def test_change_name(self):
        customer = create_customer()

        customer.change_name("Jane")

        assert customer.name == "Jane"

    def test_change_name_to_empty_rejected(self):
        customer = create_customer()

        with pytest.raises(ValueError, match="Name is required"):
            customer.change_name("")

        assert customer.name == "Customer 1"

    def test_change_address_replaces_value(self):
        customer = create_customer()
        new_address = create_address("Street 2", 2)

        customer.change_address(new_address)

        assert customer.address == new_address

    def test_activate_with_address(self):
        customer = create_customer()

        customer.activate()

        assert customer.is_active() is True

    def test_activate_without_address_rejected(self):
        customer = create_customer(with_address=False)

        with pytest.raises(
            ValueError, match="Address is mandatory to activate a customer"
        ):
            customer.activate()

        assert customer.is_active() is False

    def test_deactivate(self):
        customer = create_customer()
        customer.activate()

        customer.deactivate()

        assert customer.is_active() is False


@pytest.mark.unit
class TestCustomerRewardPoints:
    def test_add_reward_points_accumulates(self):
        customer = create_customer()

        customer.add_reward_points(10)
        customer.add_reward_points(5)

        assert customer.reward_points == 15

    def test_add_negative_points_rejected(self):
        customer = create_customer()

        with pytest.raises(ValueError, match="cannot be negative"):
            customer.add_reward_points(-1)

        assert customer.reward_points == 0
