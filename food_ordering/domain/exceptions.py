"""
Order domain errors.

Every rule violation in the order flow surfaces as an OrderDomainException.
The ``code`` attribute tells boundary callers which rule failed, so they can
branch on it instead of parsing the message.
"""
from enum import Enum
from typing import Optional


class OrderErrorCode(str, Enum):
    """Failure kinds raised by the order domain."""

    CUSTOMER_NOT_FOUND = "customer_not_found"
    RESTAURANT_NOT_FOUND = "restaurant_not_found"
    RESTAURANT_NOT_ACTIVE = "restaurant_not_active"
    INVALID_ORDER_STATE = "invalid_order_state"
    INVALID_TOTAL_PRICE = "invalid_total_price"
    INVALID_ITEM_PRICE = "invalid_item_price"
    INVALID_STATE_TRANSITION = "invalid_state_transition"
    ORDER_NOT_SAVED = "order_not_saved"
    ORDER_NOT_FOUND = "order_not_found"


class OrderDomainException(Exception):
    """Raised when an order violates a business rule."""

    def __init__(self, message: str, code: OrderErrorCode = OrderErrorCode.INVALID_ORDER_STATE):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message


class OrderNotFoundException(OrderDomainException):
    """Raised when an order lookup by tracking id finds nothing."""

    def __init__(self, message: str):
        super().__init__(message, OrderErrorCode.ORDER_NOT_FOUND)


class InvalidStateTransition(OrderDomainException):
    """Raised when an order status change is not allowed from its current status."""

    def __init__(self, current, target, operation: Optional[str] = None):
        self.current = current
        self.target = target
        self.operation = operation or target.name.lower()
        super().__init__(
            f"Order is not in correct state for {self.operation} operation!",
            OrderErrorCode.INVALID_STATE_TRANSITION,
        )
