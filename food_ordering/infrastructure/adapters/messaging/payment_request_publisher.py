"""
In-memory payment request publisher.

Stands in for the broker producer: builds the payment request message and
keeps it in an outbox list keyed by topic.
"""
import logging
from typing import List, Tuple

from food_ordering.application.dtos.payment_dto import PaymentRequestMessage
from food_ordering.application.interfaces import OrderCreatedPaymentRequestMessagePublisher
from food_ordering.application.mappers import OrderDataMapper
from food_ordering.domain.events import OrderCreatedEvent


logger = logging.getLogger(__name__)


class InMemoryPaymentRequestMessagePublisher(OrderCreatedPaymentRequestMessagePublisher):
    """Collects payment requests instead of sending them to a broker."""

    def __init__(self, topic_name: str = "payment-request"):
        self.topic_name = topic_name
        self.sent_messages: List[Tuple[str, PaymentRequestMessage]] = []
        logger.info(f"InMemoryPaymentRequestMessagePublisher initialized (topic: {topic_name})")

    async def publish(self, event: OrderCreatedEvent) -> None:
        message = OrderDataMapper.order_created_event_to_payment_request(event)
        self.sent_messages.append((self.topic_name, message))
        logger.info(
            f"Payment request sent to {self.topic_name} for order id: {message.order_id} "
            f"(price: {message.price})"
        )

    def clear(self) -> None:
        """Clear the outbox (for demo/testing)."""
        self.sent_messages.clear()
