"""
End-to-end flow through the composition root with in-memory adapters:
create order → event bus → payment request outbox → track order.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from food_ordering.application.dtos import PaymentOrderStatus, TrackOrderQuery
from food_ordering.bootstrap import build_order_application_service
from food_ordering.domain.entities import Customer
from food_ordering.domain.enums import OrderStatus
from food_ordering.domain.exceptions import OrderDomainException, OrderErrorCode, OrderNotFoundException
from food_ordering.domain.value_objects import CustomerId, TrackingId
from food_ordering.infrastructure.adapters.persistence import (
    InMemoryCustomerRepository,
    InMemoryRestaurantRepository,
)
from food_ordering.settings import OrderServiceSettings, get_settings

from tests.factories import CUSTOMER_ID, make_command, make_restaurant


@pytest.fixture
def settings():
    return OrderServiceSettings(
        log_level="debug",
        payment_request_topic_name="payment-request-test",
        order_created_message="Order created successfully",
    )


@pytest.fixture
def container(settings):
    return build_order_application_service(
        settings=settings,
        customer_repository=InMemoryCustomerRepository([Customer(CustomerId(CUSTOMER_ID))]),
        restaurant_repository=InMemoryRestaurantRepository([make_restaurant(active=True)]),
    )


@pytest.mark.asyncio
async def test_created_order_is_tracked_and_payment_requested(container):
    service = container.order_application_service

    response = await service.create_order(make_command())

    assert response.order_status == OrderStatus.PENDING
    stored = container.order_repository.get_all()
    assert len(stored) == 1
    assert stored[0].tracking_id == TrackingId(response.order_tracking_id)

    sent = container.payment_request_message_publisher.sent_messages
    assert len(sent) == 1
    topic, message = sent[0]
    assert topic == "payment-request-test"
    assert message.order_id == stored[0].order_id.value
    assert message.customer_id == CUSTOMER_ID
    assert message.price == Decimal("200.00")
    assert message.payment_order_status == PaymentOrderStatus.PENDING

    tracked = await service.track_order(TrackOrderQuery(order_tracking_id=response.order_tracking_id))
    assert tracked.order_tracking_id == response.order_tracking_id
    assert tracked.order_status == OrderStatus.PENDING
    assert tracked.failure_messages == []


@pytest.mark.asyncio
async def test_rejected_order_leaves_no_trace(container):
    with pytest.raises(OrderDomainException):
        await container.order_application_service.create_order(make_command(first_item_price="250.00"))

    assert container.order_repository.get_all() == []
    assert container.payment_request_message_publisher.sent_messages == []


@pytest.mark.asyncio
async def test_inactive_restaurant_through_in_memory_catalog(settings):
    container = build_order_application_service(
        settings=settings,
        customer_repository=InMemoryCustomerRepository([Customer(CustomerId(CUSTOMER_ID))]),
        restaurant_repository=InMemoryRestaurantRepository([make_restaurant(active=False)]),
    )

    with pytest.raises(OrderDomainException) as exc_info:
        await container.order_application_service.create_order(make_command())

    assert exc_info.value.code == OrderErrorCode.RESTAURANT_NOT_ACTIVE


@pytest.mark.asyncio
async def test_track_unknown_order(container):
    tracking_id = uuid4()

    with pytest.raises(OrderNotFoundException) as exc_info:
        await container.order_application_service.track_order(TrackOrderQuery(order_tracking_id=tracking_id))

    assert str(exc_info.value) == f"Could not find order with tracking id: {tracking_id}"
    assert exc_info.value.code == OrderErrorCode.ORDER_NOT_FOUND


@pytest.mark.asyncio
async def test_track_order_reports_failure_messages(container):
    response = await container.order_application_service.create_order(make_command())
    order = container.order_repository.get_all()[0]
    order.init_cancel(["Payment failed: insufficient credit"])
    order.cancel()

    tracked = await container.order_application_service.track_order(
        TrackOrderQuery(order_tracking_id=response.order_tracking_id)
    )

    assert tracked.order_status == OrderStatus.CANCELLED
    assert tracked.failure_messages == ["Payment failed: insufficient credit"]


@pytest.mark.asyncio
async def test_published_events_are_recorded_on_the_bus(container):
    response = await container.order_application_service.create_order(make_command())

    records = container.event_bus.get_stored_events()
    assert len(records) == 1
    assert records[0]["event_type"] == "OrderCreatedEvent"
    assert records[0]["data"]["tracking_id"] == str(response.order_tracking_id)


def test_settings_come_from_the_environment_when_omitted(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ORDER_SERVICE_PAYMENT_REQUEST_TOPIC_NAME", "payments-from-env")
    get_settings.cache_clear()
    try:
        container = build_order_application_service()
    finally:
        get_settings.cache_clear()

    assert container.settings.payment_request_topic_name == "payments-from-env"
    assert container.payment_request_message_publisher.topic_name == "payments-from-env"
