"""Static mappers for application DTOs ↔ domain objects."""

from typing import List, Optional
from uuid import uuid4

from food_ordering.domain.entities import Order, OrderItem, Product, Restaurant
from food_ordering.domain.events import OrderCreatedEvent
from food_ordering.domain.value_objects import (
    CustomerId,
    Money,
    ProductId,
    RestaurantId,
    StreetAddress,
)

from .dtos import order_dto
from .dtos.order_dto import (
    CreateOrderCommand,
    CreateOrderResponse,
    OrderAddress,
    TrackOrderResponse,
)
from .dtos.payment_dto import PaymentOrderStatus, PaymentRequestMessage


class OrderDataMapper:
    """Static mapper between order DTOs and the Order aggregate."""

    @staticmethod
    def create_order_command_to_restaurant(command: CreateOrderCommand) -> Restaurant:
        """Build the restaurant lookup projection (id + requested product ids).

        Args:
            command: CreateOrderCommand DTO

        Returns:
            Restaurant projection with id-only products
        """
        return Restaurant(
            restaurant_id=RestaurantId(command.restaurant_id),
            products=[Product(product_id=ProductId(item.product_id)) for item in command.items],
        )

    @staticmethod
    def create_order_command_to_order(command: CreateOrderCommand) -> Order:
        """Convert command DTO to a new, uninitialized Order aggregate.

        Args:
            command: CreateOrderCommand DTO

        Returns:
            Order aggregate (no id, tracking id or status yet)
        """
        return Order(
            customer_id=CustomerId(command.customer_id),
            restaurant_id=RestaurantId(command.restaurant_id),
            delivery_address=OrderDataMapper.order_address_to_street_address(command.address),
            price=Money(command.price),
            items=OrderDataMapper.order_items_to_order_item_entities(command.items),
        )

    @staticmethod
    def order_items_to_order_item_entities(items: List[order_dto.OrderItem]) -> List[OrderItem]:
        return [
            OrderItem(
                product=Product(product_id=ProductId(item.product_id)),
                quantity=item.quantity,
                price=Money(item.price),
                sub_total=Money(item.sub_total),
            )
            for item in items
        ]

    @staticmethod
    def order_address_to_street_address(address: OrderAddress) -> StreetAddress:
        return StreetAddress.create(
            street=address.street,
            postal_code=address.postal_code,
            city=address.city,
        )

    @staticmethod
    def order_to_create_order_response(order: Order, message: Optional[str] = None) -> CreateOrderResponse:
        return CreateOrderResponse(
            order_tracking_id=order.tracking_id.value,
            order_status=order.order_status,
            message=message,
        )

    @staticmethod
    def order_to_track_order_response(order: Order) -> TrackOrderResponse:
        return TrackOrderResponse(
            order_tracking_id=order.tracking_id.value,
            order_status=order.order_status,
            failure_messages=list(order.failure_messages),
        )

    @staticmethod
    def order_created_event_to_payment_request(event: OrderCreatedEvent) -> PaymentRequestMessage:
        """Build the payment request sent for a newly created order.

        Args:
            event: OrderCreatedEvent wrapping the saved order

        Returns:
            PaymentRequestMessage asking for a PENDING payment
        """
        order = event.order
        return PaymentRequestMessage(
            id=uuid4(),
            saga_id="",
            customer_id=order.customer_id.value,
            order_id=order.order_id.value,
            price=order.price.amount,
            created_at=event.created_at,
            payment_order_status=PaymentOrderStatus.PENDING,
        )
