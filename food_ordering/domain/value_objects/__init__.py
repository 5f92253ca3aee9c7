"""Domain value objects."""

from .value_objects import (
    BaseId,
    CustomerId,
    Money,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    StreetAddress,
    TrackingId,
)

__all__ = [
    "BaseId",
    "CustomerId",
    "Money",
    "OrderId",
    "OrderItemId",
    "ProductId",
    "RestaurantId",
    "StreetAddress",
    "TrackingId",
]
