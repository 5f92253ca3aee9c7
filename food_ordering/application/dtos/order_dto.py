"""Application DTOs for Order operations."""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from food_ordering.domain.enums import OrderStatus

# Cents precision, up to 9_999_999_999.99
MONEY_MAX_DIGITS = 12


class OrderAddress(BaseModel):
    """Delivery address as sent by the caller."""

    street: str = Field(..., min_length=1, max_length=50, description="Street")
    postal_code: str = Field(..., min_length=1, max_length=10, description="Postal code")
    city: str = Field(..., min_length=1, max_length=50, description="City")

    model_config = {"frozen": True, "str_strip_whitespace": True}


class OrderItem(BaseModel):
    """DTO for order item."""

    product_id: UUID = Field(..., description="Product id in the restaurant catalog")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    price: Decimal = Field(..., max_digits=MONEY_MAX_DIGITS, decimal_places=2, description="Unit price")
    sub_total: Decimal = Field(
        ..., max_digits=MONEY_MAX_DIGITS, decimal_places=2, description="Unit price x quantity"
    )

    model_config = {"frozen": True}


class CreateOrderCommand(BaseModel):
    """Request DTO for creating an order."""

    customer_id: UUID = Field(..., description="Ordering customer")
    restaurant_id: UUID = Field(..., description="Restaurant the order is placed at")
    price: Decimal = Field(..., max_digits=MONEY_MAX_DIGITS, decimal_places=2, description="Declared order total")
    items: List[OrderItem] = Field(..., description="Order items")
    address: OrderAddress = Field(..., description="Delivery address")

    model_config = {"frozen": True}


class CreateOrderResponse(BaseModel):
    """Response DTO for a created order."""

    order_tracking_id: UUID = Field(..., description="Tracking id for status lookups")
    order_status: OrderStatus = Field(..., description="Order status")
    message: Optional[str] = Field(None, description="Human readable outcome")

    model_config = {"frozen": True}


class TrackOrderQuery(BaseModel):
    """Query DTO for looking up an order by tracking id."""

    order_tracking_id: UUID = Field(..., description="Tracking id returned on creation")

    model_config = {"frozen": True}


class TrackOrderResponse(BaseModel):
    """Response DTO for order tracking."""

    order_tracking_id: UUID = Field(..., description="Tracking id")
    order_status: OrderStatus = Field(..., description="Order status")
    failure_messages: List[str] = Field(default_factory=list, description="Why the order failed, if it did")

    model_config = {"frozen": True}
