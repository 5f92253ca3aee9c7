"""Outgoing payment request message."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field


class PaymentOrderStatus(str, Enum):
    """What the payment service is asked to do."""

    PENDING = "PENDING"
    CANCELLED = "CANCELLED"


class PaymentRequestMessage(BaseModel):
    """Payload sent to the payment service when an order is created."""

    id: UUID = Field(..., description="Message id")
    saga_id: str = Field(default="", description="Saga correlation id")
    customer_id: UUID = Field(..., description="Paying customer")
    order_id: UUID = Field(..., description="Order to charge")
    price: Decimal = Field(..., description="Amount to charge")
    created_at: datetime = Field(..., description="When the order was created")
    payment_order_status: PaymentOrderStatus = Field(..., description="Requested payment action")

    model_config = {"frozen": True}
