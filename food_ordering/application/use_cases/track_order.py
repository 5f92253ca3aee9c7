"""Track Order Use Case: look an order up by its tracking id."""
import logging
from typing import Optional, Type

from food_ordering.domain.exceptions import OrderNotFoundException
from food_ordering.domain.repositories import OrderRepository
from food_ordering.domain.value_objects import TrackingId

from ..dtos.order_dto import TrackOrderQuery, TrackOrderResponse
from ..mappers import OrderDataMapper


class OrderTrackCommandHandler:
    """Answers order status queries."""

    def __init__(
        self,
        order_repository: OrderRepository,
        order_data_mapper: Type[OrderDataMapper] = OrderDataMapper,
        logger: Optional[logging.Logger] = None,
    ):
        self.order_repository = order_repository
        self.order_data_mapper = order_data_mapper
        self.logger = logger or logging.getLogger(__name__)

    async def track_order(self, query: TrackOrderQuery) -> TrackOrderResponse:
        """
        Raises:
            OrderNotFoundException: If no order has this tracking id
        """
        order = await self.order_repository.find_by_tracking_id(TrackingId(query.order_tracking_id))
        if order is None:
            self.logger.warning(f"Could not find order with tracking id: {query.order_tracking_id}")
            raise OrderNotFoundException(
                f"Could not find order with tracking id: {query.order_tracking_id}"
            )
        return self.order_data_mapper.order_to_track_order_response(order)
