"""
In-memory repository implementations.

Used by tests, demos and the default composition root. Persistence
technology is outside the order service; real adapters implement the
same ports.
"""
from dataclasses import replace
from typing import Dict, Iterable, List, Optional
import logging

from food_ordering.domain.entities import Customer, Order, Restaurant
from food_ordering.domain.repositories import (
    CustomerRepository,
    OrderRepository,
    RestaurantRepository,
)
from food_ordering.domain.value_objects import CustomerId, RestaurantId, TrackingId


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores orders in a dictionary keyed by tracking id.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[TrackingId, Order] = {}
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    async def save(self, order: Order) -> Optional[Order]:
        """
        Save order to in-memory storage.

        Args:
            order: Initialized Order aggregate

        Returns:
            The stored order, None if it has no tracking id yet
        """
        if order.tracking_id is None:
            logger.warning(f"Refusing to save order without tracking id: {order.order_id}")
            return None
        self._storage[order.tracking_id] = order
        logger.info(
            f"Order saved to in-memory repository: {order.order_id} "
            f"(status: {order.order_status.value if order.order_status else None}, "
            f"tracking id: {order.tracking_id})"
        )
        return order

    async def find_by_tracking_id(self, tracking_id: TrackingId) -> Optional[Order]:
        """
        Get order by tracking id from in-memory storage.

        Args:
            tracking_id: Tracking id to lookup

        Returns:
            Order if found, None otherwise
        """
        order = self._storage.get(tracking_id)
        if order:
            logger.info(f"Order found in in-memory repository: {tracking_id}")
        else:
            logger.info(f"Order not found in in-memory repository: {tracking_id}")
        return order

    def get_all(self) -> List[Order]:
        """Get all orders (for demo/testing)."""
        return list(self._storage.values())

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        self._storage.clear()
        logger.info("In-memory order repository cleared")


class InMemoryCustomerRepository(CustomerRepository):
    """Customers known to the order service."""

    def __init__(self, customers: Iterable[Customer] = ()):
        self._storage: Dict[CustomerId, Customer] = {c.customer_id: c for c in customers}

    def add(self, customer: Customer) -> None:
        self._storage[customer.customer_id] = customer

    async def find_customer(self, customer_id: CustomerId) -> Optional[Customer]:
        customer = self._storage.get(customer_id)
        logger.debug(f"Customer {customer_id} found: {customer is not None}")
        return customer


class InMemoryRestaurantRepository(RestaurantRepository):
    """
    Restaurant catalogs kept in memory.

    Lookups answer with a snapshot restricted to the requested products,
    so callers can never mutate the stored catalog.
    """

    def __init__(self, restaurants: Iterable[Restaurant] = ()):
        self._storage: Dict[RestaurantId, Restaurant] = {r.restaurant_id: r for r in restaurants}

    def add(self, restaurant: Restaurant) -> None:
        self._storage[restaurant.restaurant_id] = restaurant

    async def find_restaurant_information(self, restaurant: Restaurant) -> Optional[Restaurant]:
        stored = self._storage.get(restaurant.restaurant_id)
        if stored is None:
            logger.info(f"Restaurant not found in in-memory repository: {restaurant.restaurant_id}")
            return None

        requested = {product.product_id for product in restaurant.products}
        products = [
            replace(product)
            for product in stored.products
            if not requested or product.product_id in requested
        ]
        return Restaurant(restaurant_id=stored.restaurant_id, products=products, active=stored.active)
