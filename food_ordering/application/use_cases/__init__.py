"""Application use cases."""
from .create_order import OrderCreateCommandHandler, OrderCreateHelper
from .track_order import OrderTrackCommandHandler

__all__ = ["OrderCreateCommandHandler", "OrderCreateHelper", "OrderTrackCommandHandler"]
