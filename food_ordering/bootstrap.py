"""
Composition root.

Wires use cases to their ports explicitly. Callers pass the adapters they
want; anything left out gets the in-memory implementation.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from food_ordering.application.interfaces import OrderCreatedPaymentRequestMessagePublisher
from food_ordering.application.services import OrderApplicationService
from food_ordering.application.use_cases import (
    OrderCreateCommandHandler,
    OrderCreateHelper,
    OrderTrackCommandHandler,
)
from food_ordering.domain.repositories import (
    CustomerRepository,
    OrderRepository,
    RestaurantRepository,
)
from food_ordering.domain.services import OrderDomainService
from food_ordering.infrastructure.adapters.messaging import InMemoryPaymentRequestMessagePublisher
from food_ordering.infrastructure.adapters.persistence import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryRestaurantRepository,
)
from food_ordering.infrastructure.event_bus import InMemoryEventBus
from food_ordering.infrastructure.listeners import OrderCreatedEventApplicationListener
from food_ordering.infrastructure.logging import configure_logging
from food_ordering.settings import OrderServiceSettings, get_settings


def load_environment(env_file: Optional[Path] = None) -> None:
    """Load environment variables from ``.env`` before settings are created."""
    load_dotenv(dotenv_path=env_file or Path.cwd() / ".env")


@dataclass
class OrderServiceContainer:
    """Everything the composition root built, for callers that need the parts."""

    settings: OrderServiceSettings
    order_application_service: OrderApplicationService
    order_repository: OrderRepository
    customer_repository: CustomerRepository
    restaurant_repository: RestaurantRepository
    event_bus: InMemoryEventBus
    payment_request_message_publisher: OrderCreatedPaymentRequestMessagePublisher


def build_order_application_service(
    settings: Optional[OrderServiceSettings] = None,
    order_repository: Optional[OrderRepository] = None,
    customer_repository: Optional[CustomerRepository] = None,
    restaurant_repository: Optional[RestaurantRepository] = None,
    payment_request_message_publisher: Optional[OrderCreatedPaymentRequestMessagePublisher] = None,
    logger: Optional[logging.Logger] = None,
) -> OrderServiceContainer:
    """
    Build the order application service and its collaborators.

    Args:
        settings: Service settings (read from the environment if omitted)
        order_repository: Order persistence port
        customer_repository: Customer lookup port
        restaurant_repository: Restaurant catalog lookup port
        payment_request_message_publisher: Payment request output port
        logger: Logger injected into the use cases

    Returns:
        OrderServiceContainer with the wired service and its ports
    """
    if settings is None:
        load_environment()
        settings = get_settings()

    logger = logger or configure_logging(settings.log_level)

    order_repository = order_repository or InMemoryOrderRepository()
    customer_repository = customer_repository or InMemoryCustomerRepository()
    restaurant_repository = restaurant_repository or InMemoryRestaurantRepository()
    payment_request_message_publisher = payment_request_message_publisher or (
        InMemoryPaymentRequestMessagePublisher(settings.payment_request_topic_name)
    )

    event_bus = InMemoryEventBus()
    OrderCreatedEventApplicationListener(payment_request_message_publisher).register(event_bus)

    order_create_helper = OrderCreateHelper(
        order_domain_service=OrderDomainService(logger=logger),
        order_repository=order_repository,
        customer_repository=customer_repository,
        restaurant_repository=restaurant_repository,
        logger=logger,
    )
    order_application_service = OrderApplicationService(
        order_create_command_handler=OrderCreateCommandHandler(
            order_create_helper=order_create_helper,
            domain_event_publisher=event_bus,
            order_created_message=settings.order_created_message,
            logger=logger,
        ),
        order_track_command_handler=OrderTrackCommandHandler(
            order_repository=order_repository,
            logger=logger,
        ),
    )
    logger.info("Order application service wired")

    return OrderServiceContainer(
        settings=settings,
        order_application_service=order_application_service,
        order_repository=order_repository,
        customer_repository=customer_repository,
        restaurant_repository=restaurant_repository,
        event_bus=event_bus,
        payment_request_message_publisher=payment_request_message_publisher,
    )
