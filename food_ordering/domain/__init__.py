"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order, OrderItem, Product, Restaurant
from .enums import OrderStatus
from .events import OrderCancelledEvent, OrderCreatedEvent, OrderPaidEvent
from .exceptions import InvalidStateTransition, OrderDomainException, OrderErrorCode, OrderNotFoundException
from .repositories import CustomerRepository, OrderRepository, RestaurantRepository
from .services import OrderDomainService
from .value_objects import (
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
    "Customer",
    "CustomerId",
    "CustomerRepository",
    "InvalidStateTransition",
    "Money",
    "Order",
    "OrderCancelledEvent",
    "OrderCreatedEvent",
    "OrderDomainException",
    "OrderDomainService",
    "OrderErrorCode",
    "OrderId",
    "OrderItem",
    "OrderItemId",
    "OrderNotFoundException",
    "OrderPaidEvent",
    "OrderRepository",
    "OrderStatus",
    "Product",
    "ProductId",
    "Restaurant",
    "RestaurantId",
    "RestaurantRepository",
    "StreetAddress",
    "TrackingId",
]
