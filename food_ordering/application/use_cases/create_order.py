"""
Create Order Use Case.

Flow:
1. Check the customer exists
2. Check the restaurant exists and is active
3. Map the command to a new Order aggregate
4. Validate prices (own arithmetic, then restaurant catalog) and initialize
5. Save the order
6. Publish OrderCreatedEvent and answer with the tracking id

Any failure aborts before the order is saved or the event published.
"""
from dataclasses import replace
import logging
from typing import Optional, Type

from food_ordering.domain.entities import Customer, Order, Restaurant
from food_ordering.domain.event_publisher import DomainEventPublisher
from food_ordering.domain.events import OrderCreatedEvent
from food_ordering.domain.exceptions import OrderDomainException, OrderErrorCode
from food_ordering.domain.repositories import (
    CustomerRepository,
    OrderRepository,
    RestaurantRepository,
)
from food_ordering.domain.services import OrderDomainService
from food_ordering.domain.services.order_domain_service import restaurant_not_active
from food_ordering.domain.value_objects import CustomerId

from ..dtos.order_dto import CreateOrderCommand, CreateOrderResponse
from ..mappers import OrderDataMapper


class OrderCreateHelper:
    """
    Validates and persists a new order.

    Exactly one customer read, one restaurant read and one order write
    per call. No retries.
    """

    def __init__(
        self,
        order_domain_service: OrderDomainService,
        order_repository: OrderRepository,
        customer_repository: CustomerRepository,
        restaurant_repository: RestaurantRepository,
        order_data_mapper: Type[OrderDataMapper] = OrderDataMapper,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize helper with dependencies.

        Args:
            order_domain_service: Domain rules for validating/initiating orders
            order_repository: Repository for order persistence
            customer_repository: Customer lookup
            restaurant_repository: Restaurant catalog lookup
            order_data_mapper: DTO ↔ domain mapper
            logger: Logger to report progress on (module logger by default)
        """
        self.order_domain_service = order_domain_service
        self.order_repository = order_repository
        self.customer_repository = customer_repository
        self.restaurant_repository = restaurant_repository
        self.order_data_mapper = order_data_mapper
        self.logger = logger or logging.getLogger(__name__)

    async def persist_order(self, command: CreateOrderCommand) -> OrderCreatedEvent:
        """
        Validate the command against customer and restaurant data and save the order.

        Args:
            command: CreateOrderCommand DTO

        Returns:
            OrderCreatedEvent wrapping the saved order

        Raises:
            OrderDomainException: On any business rule violation or if the
                order could not be saved
        """
        await self._check_customer(CustomerId(command.customer_id))
        restaurant = await self._check_restaurant(command)

        order = self.order_data_mapper.create_order_command_to_order(command)
        order_created_event = self.order_domain_service.validate_and_initiate_order(order, restaurant)

        saved_order = await self._save_order(order)
        return replace(order_created_event, order=saved_order)

    async def _check_customer(self, customer_id: CustomerId) -> Customer:
        customer = await self.customer_repository.find_customer(customer_id)
        if customer is None:
            self.logger.warning(f"Could not find customer with customer id: {customer_id}")
            raise OrderDomainException(
                f"Customer with id {customer_id} not found",
                OrderErrorCode.CUSTOMER_NOT_FOUND,
            )
        return customer

    async def _check_restaurant(self, command: CreateOrderCommand) -> Restaurant:
        projection = self.order_data_mapper.create_order_command_to_restaurant(command)
        restaurant = await self.restaurant_repository.find_restaurant_information(projection)
        if restaurant is None:
            self.logger.warning(f"Could not find restaurant with restaurant id: {command.restaurant_id}")
            raise OrderDomainException(
                f"Restaurant with id {command.restaurant_id} not found",
                OrderErrorCode.RESTAURANT_NOT_FOUND,
            )
        if not restaurant.active:
            self.logger.warning(f"Restaurant with id: {restaurant.restaurant_id} is not active")
            raise restaurant_not_active(restaurant)
        return restaurant

    async def _save_order(self, order: Order) -> Order:
        saved_order = await self.order_repository.save(order)
        if saved_order is None:
            self.logger.error(f"Could not save order with tracking id: {order.tracking_id}")
            raise OrderDomainException("Could not save order!", OrderErrorCode.ORDER_NOT_SAVED)
        self.logger.info(f"Order is saved with id: {saved_order.order_id}")
        return saved_order


class OrderCreateCommandHandler:
    """Entry point of the create-order use case."""

    def __init__(
        self,
        order_create_helper: OrderCreateHelper,
        domain_event_publisher: DomainEventPublisher,
        order_data_mapper: Type[OrderDataMapper] = OrderDataMapper,
        order_created_message: Optional[str] = "Order created successfully",
        logger: Optional[logging.Logger] = None,
    ):
        self.order_create_helper = order_create_helper
        self.domain_event_publisher = domain_event_publisher
        self.order_data_mapper = order_data_mapper
        self.order_created_message = order_created_message
        self.logger = logger or logging.getLogger(__name__)

    async def create_order(self, command: CreateOrderCommand) -> CreateOrderResponse:
        """
        Create the order, publish OrderCreatedEvent and map the response.

        Exceptions from the helper propagate unchanged.
        """
        order_created_event = await self.order_create_helper.persist_order(command)
        self.logger.info(f"Order is created with id: {order_created_event.order.order_id}")
        await self.domain_event_publisher.publish(order_created_event)
        return self.order_data_mapper.order_to_create_order_response(
            order_created_event.order, self.order_created_message
        )
