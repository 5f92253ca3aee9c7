"""Shared fixtures."""
import pytest

from food_ordering.application.dtos import CreateOrderCommand
from food_ordering.domain.entities import Customer, Restaurant
from food_ordering.domain.value_objects import CustomerId

from tests.factories import CUSTOMER_ID, make_command, make_restaurant


@pytest.fixture
def create_order_command() -> CreateOrderCommand:
    return make_command()


@pytest.fixture
def create_order_command_wrong_price() -> CreateOrderCommand:
    return make_command(first_item_price="250.00")


@pytest.fixture
def create_order_command_wrong_product_price() -> CreateOrderCommand:
    return make_command(first_item_price="210.00")


@pytest.fixture
def customer() -> Customer:
    return Customer(CustomerId(CUSTOMER_ID))


@pytest.fixture
def restaurant() -> Restaurant:
    return make_restaurant(active=True)


@pytest.fixture
def passive_restaurant() -> Restaurant:
    return make_restaurant(active=False)
