"""Tests for OrderDomainService."""
from decimal import Decimal

import pytest

from food_ordering.application.mappers import OrderDataMapper
from food_ordering.domain.enums import OrderStatus
from food_ordering.domain.events import OrderCancelledEvent, OrderCreatedEvent, OrderPaidEvent
from food_ordering.domain.exceptions import OrderDomainException, OrderErrorCode
from food_ordering.domain.services import OrderDomainService

from tests.factories import RESTAURANT_ID, make_command


@pytest.fixture
def service():
    return OrderDomainService()


@pytest.fixture
def order():
    return OrderDataMapper.create_order_command_to_order(make_command())


def test_validate_and_initiate_order(service, order, restaurant):
    event = service.validate_and_initiate_order(order, restaurant)

    assert isinstance(event, OrderCreatedEvent)
    assert event.order is order
    assert order.order_status == OrderStatus.PENDING
    assert event.aggregate_id == str(order.order_id)


def test_inactive_restaurant_is_rejected(service, order, passive_restaurant):
    with pytest.raises(OrderDomainException) as exc_info:
        service.validate_and_initiate_order(order, passive_restaurant)

    assert str(exc_info.value) == f"Restaurant with id {RESTAURANT_ID} is currently not active"
    assert exc_info.value.code == OrderErrorCode.RESTAURANT_NOT_ACTIVE
    assert order.order_status is None


def test_failed_validation_leaves_order_uninitialized(service, restaurant):
    order = OrderDataMapper.create_order_command_to_order(make_command(price=Decimal("10.00")))

    with pytest.raises(OrderDomainException):
        service.validate_and_initiate_order(order, restaurant)

    assert order.order_id is None
    assert order.tracking_id is None


def test_lifecycle_events(service, order, restaurant):
    service.validate_and_initiate_order(order, restaurant)

    paid = service.pay_order(order)
    assert isinstance(paid, OrderPaidEvent)
    assert order.order_status == OrderStatus.PAID

    cancelling = service.cancel_order_payment(order, ["Restaurant is closed"])
    assert isinstance(cancelling, OrderCancelledEvent)
    assert order.order_status == OrderStatus.CANCELLING

    service.cancel_order(order)
    assert order.order_status == OrderStatus.CANCELLED
    assert order.failure_messages == ["Restaurant is closed"]


def test_approve_order(service, order, restaurant):
    service.validate_and_initiate_order(order, restaurant)
    service.pay_order(order)
    service.approve_order(order)

    assert order.order_status == OrderStatus.APPROVED


def test_event_to_dict(service, order, restaurant):
    event = service.validate_and_initiate_order(order, restaurant)

    data = event.to_dict()

    assert data["event_type"] == "OrderCreatedEvent"
    assert data["aggregate_type"] == "Order"
    assert data["aggregate_id"] == str(order.order_id)
    assert data["occurred_at"] == event.created_at.isoformat()
    assert data["data"]["price"] == "200.00"
    assert data["data"]["order_status"] == "PENDING"
    assert data["data"]["tracking_id"] == str(order.tracking_id)
