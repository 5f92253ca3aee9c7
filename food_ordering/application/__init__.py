"""Application layer - use cases, DTOs and output ports."""

from .dtos import CreateOrderCommand, CreateOrderResponse, TrackOrderQuery, TrackOrderResponse
from .services import OrderApplicationService

__all__ = [
    "CreateOrderCommand",
    "CreateOrderResponse",
    "OrderApplicationService",
    "TrackOrderQuery",
    "TrackOrderResponse",
]
