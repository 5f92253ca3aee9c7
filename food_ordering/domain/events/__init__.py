"""Domain events."""
from .base import DomainEvent
from .order_events import (
    OrderCancelledEvent,
    OrderCreatedEvent,
    OrderEvent,
    OrderPaidEvent,
)

__all__ = [
    "DomainEvent",
    "OrderEvent",
    "OrderCreatedEvent",
    "OrderPaidEvent",
    "OrderCancelledEvent",
]
