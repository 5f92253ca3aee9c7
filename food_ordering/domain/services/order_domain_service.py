"""
Order domain service.

Holds the rules that need more than the Order aggregate alone (the
restaurant snapshot) and turns aggregate state changes into events.
"""
import logging
from typing import Iterable, Optional

from ..entities.order import Order
from ..entities.restaurant import Restaurant
from ..events.order_events import OrderCancelledEvent, OrderCreatedEvent, OrderPaidEvent
from ..exceptions import OrderDomainException, OrderErrorCode


def restaurant_not_active(restaurant: Restaurant) -> OrderDomainException:
    return OrderDomainException(
        f"Restaurant with id {restaurant.restaurant_id} is currently not active",
        OrderErrorCode.RESTAURANT_NOT_ACTIVE,
    )


class OrderDomainService:
    """Validates, initiates and moves orders through their lifecycle."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def validate_and_initiate_order(self, order: Order, restaurant: Restaurant) -> OrderCreatedEvent:
        """
        Validate a new order against itself and the restaurant catalog, then initialize it.

        Args:
            order: Freshly mapped order
            restaurant: Restaurant snapshot with catalog prices

        Returns:
            OrderCreatedEvent for the initialized order

        Raises:
            OrderDomainException: If the restaurant is inactive or any
                price rule fails
        """
        if not restaurant.active:
            raise restaurant_not_active(restaurant)
        order.validate_order()
        order.validate_items_price(restaurant.products)
        order.initialize_order()
        self._logger.info(f"Order with id: {order.order_id} is initiated")
        return OrderCreatedEvent(order=order)

    def pay_order(self, order: Order) -> OrderPaidEvent:
        order.pay()
        self._logger.info(f"Order with id: {order.order_id} is paid")
        return OrderPaidEvent(order=order)

    def approve_order(self, order: Order) -> None:
        order.approve()
        self._logger.info(f"Order with id: {order.order_id} is approved")

    def cancel_order_payment(
        self, order: Order, failure_messages: Optional[Iterable[str]] = None
    ) -> OrderCancelledEvent:
        """Start cancellation; the returned event asks payment to roll back."""
        order.init_cancel(failure_messages)
        self._logger.info(f"Order payment is cancelling for order id: {order.order_id}")
        return OrderCancelledEvent(order=order)

    def cancel_order(self, order: Order, failure_messages: Optional[Iterable[str]] = None) -> None:
        order.cancel(failure_messages)
        self._logger.info(f"Order with id: {order.order_id} is cancelled")
