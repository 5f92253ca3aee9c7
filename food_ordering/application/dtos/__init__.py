"""Application DTOs."""
from .order_dto import (
    CreateOrderCommand,
    CreateOrderResponse,
    OrderAddress,
    OrderItem,
    TrackOrderQuery,
    TrackOrderResponse,
)
from .payment_dto import PaymentOrderStatus, PaymentRequestMessage

__all__ = [
    "CreateOrderCommand",
    "CreateOrderResponse",
    "OrderAddress",
    "OrderItem",
    "PaymentOrderStatus",
    "PaymentRequestMessage",
    "TrackOrderQuery",
    "TrackOrderResponse",
]
