"""Forwards OrderCreatedEvent from the in-process bus to the payment request publisher."""
import logging

from food_ordering.application.interfaces import OrderCreatedPaymentRequestMessagePublisher
from food_ordering.domain.events import OrderCreatedEvent
from food_ordering.infrastructure.event_bus import InMemoryEventBus


logger = logging.getLogger(__name__)


class OrderCreatedEventApplicationListener:
    """Turns every created order into a payment request."""

    def __init__(self, payment_request_message_publisher: OrderCreatedPaymentRequestMessagePublisher):
        self.payment_request_message_publisher = payment_request_message_publisher

    async def process(self, event: OrderCreatedEvent) -> None:
        logger.info(f"Requesting payment for order id: {event.order.order_id}")
        await self.payment_request_message_publisher.publish(event)

    def register(self, event_bus: InMemoryEventBus) -> None:
        event_bus.subscribe(self.process, OrderCreatedEvent)
