"""Application layer output ports."""
from abc import abstractmethod

from food_ordering.domain.event_publisher import DomainEventPublisher
from food_ordering.domain.events import OrderCreatedEvent


class OrderCreatedPaymentRequestMessagePublisher(DomainEventPublisher[OrderCreatedEvent]):
    """
    Interface for asking the payment service to charge a new order.

    Implementations deliver the request to the messaging collaborator
    (broker topic, HTTP callback, in-memory outbox, ...).
    """

    @abstractmethod
    async def publish(self, event: OrderCreatedEvent) -> None:
        """
        Send a payment request for the created order.

        Args:
            event: OrderCreatedEvent wrapping the saved order
        """
        pass
