"""Tests for the in-memory repository adapters."""
from decimal import Decimal
from uuid import uuid4

import pytest

from food_ordering.application.mappers import OrderDataMapper
from food_ordering.domain.entities import Customer, Product, Restaurant
from food_ordering.domain.value_objects import CustomerId, Money, ProductId, RestaurantId, TrackingId
from food_ordering.infrastructure.adapters.persistence import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryRestaurantRepository,
)

from tests.factories import CUSTOMER_ID, PRODUCT_ID, RESTAURANT_ID, make_command


@pytest.mark.asyncio
async def test_order_repository_save_and_find():
    repo = InMemoryOrderRepository()
    order = OrderDataMapper.create_order_command_to_order(make_command())
    order.initialize_order()

    saved = await repo.save(order)

    assert saved is order
    assert await repo.find_by_tracking_id(order.tracking_id) is order
    assert await repo.find_by_tracking_id(TrackingId.generate()) is None

    repo.clear()
    assert repo.get_all() == []


@pytest.mark.asyncio
async def test_order_repository_refuses_uninitialized_order():
    repo = InMemoryOrderRepository()
    order = OrderDataMapper.create_order_command_to_order(make_command())

    assert await repo.save(order) is None
    assert repo.get_all() == []


@pytest.mark.asyncio
async def test_customer_repository():
    repo = InMemoryCustomerRepository([Customer(CustomerId(CUSTOMER_ID))])

    assert await repo.find_customer(CustomerId(CUSTOMER_ID)) == Customer(CustomerId(CUSTOMER_ID))
    assert await repo.find_customer(CustomerId.generate()) is None


@pytest.mark.asyncio
async def test_restaurant_repository_returns_requested_products_only():
    other_product = ProductId(uuid4())
    stored = Restaurant(
        restaurant_id=RestaurantId(RESTAURANT_ID),
        products=[
            Product(ProductId(PRODUCT_ID), "product-1", Money(Decimal("50.00"))),
            Product(other_product, "product-2", Money(Decimal("10.00"))),
        ],
        active=True,
    )
    repo = InMemoryRestaurantRepository([stored])

    snapshot = await repo.find_restaurant_information(
        OrderDataMapper.create_order_command_to_restaurant(make_command())
    )

    assert snapshot.active is True
    assert [p.product_id for p in snapshot.products] == [ProductId(PRODUCT_ID)]
    assert snapshot.products[0].price == Money(Decimal("50.00"))
    assert snapshot.products[0] is not stored.products[0]


@pytest.mark.asyncio
async def test_restaurant_repository_unknown_restaurant():
    repo = InMemoryRestaurantRepository()

    assert await repo.find_restaurant_information(Restaurant(RestaurantId.generate())) is None
