"""
Order Domain Events.

Each event wraps the order it was raised for plus the moment it was raised.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from ..entities.order import Order
from .base import DomainEvent, utcnow


@dataclass(frozen=True)
class OrderEvent(DomainEvent):
    """Base for events raised by the Order aggregate."""

    order: Order
    created_at: datetime = field(default_factory=utcnow)

    @property
    def aggregate_id(self) -> str:
        return str(self.order.order_id) if self.order.order_id else ""

    @property
    def occurred_at(self) -> datetime:
        return self.created_at

    def _get_event_data(self) -> Dict[str, Any]:
        order = self.order
        return {
            "order_id": str(order.order_id) if order.order_id else None,
            "tracking_id": str(order.tracking_id) if order.tracking_id else None,
            "customer_id": str(order.customer_id),
            "restaurant_id": str(order.restaurant_id),
            # Decimal as string for JSON serialization
            "price": str(order.price) if order.price is not None else None,
            "order_status": order.order_status.value if order.order_status else None,
            "failure_messages": list(order.failure_messages),
        }


@dataclass(frozen=True)
class OrderCreatedEvent(OrderEvent):
    """
    Order was validated, initialized and saved.

    Consumers: payment service (payment request).
    """


@dataclass(frozen=True)
class OrderPaidEvent(OrderEvent):
    """Payment for the order completed; restaurant approval comes next."""


@dataclass(frozen=True)
class OrderCancelledEvent(OrderEvent):
    """
    Order entered cancellation.

    Consumers: payment service (payment rollback).
    """
