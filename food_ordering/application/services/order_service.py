"""Application service for Order operations."""

from food_ordering.application.dtos.order_dto import (
    CreateOrderCommand,
    CreateOrderResponse,
    TrackOrderQuery,
    TrackOrderResponse,
)
from food_ordering.application.use_cases import OrderCreateCommandHandler, OrderTrackCommandHandler


class OrderApplicationService:
    """
    Input port for order operations.

    Responsibilities:
    - Single entry point for callers at the boundary (HTTP, CLI, messaging)
    - Delegate each operation to its command handler
    """

    def __init__(
        self,
        order_create_command_handler: OrderCreateCommandHandler,
        order_track_command_handler: OrderTrackCommandHandler,
    ) -> None:
        """Initialize order application service.

        Args:
            order_create_command_handler: Handler for new orders
            order_track_command_handler: Handler for tracking queries
        """
        self._order_create_command_handler = order_create_command_handler
        self._order_track_command_handler = order_track_command_handler

    async def create_order(self, command: CreateOrderCommand) -> CreateOrderResponse:
        """Create a new order.

        Args:
            command: CreateOrderCommand DTO

        Returns:
            CreateOrderResponse with tracking id and PENDING status

        Raises:
            OrderDomainException: If the order is rejected
        """
        return await self._order_create_command_handler.create_order(command)

    async def track_order(self, query: TrackOrderQuery) -> TrackOrderResponse:
        """Look up an order's status by tracking id.

        Raises:
            OrderNotFoundException: If the tracking id is unknown
        """
        return await self._order_track_command_handler.track_order(query)
