"""Repository interfaces for the order flow."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.customer import Customer
from ..entities.order import Order
from ..entities.restaurant import Restaurant
from ..value_objects import CustomerId, TrackingId


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> Optional[Order]:
        """Persist order aggregate.

        Args:
            order: Initialized Order aggregate

        Returns:
            The stored Order, or None if it could not be stored
        """
        pass

    @abstractmethod
    async def find_by_tracking_id(self, tracking_id: TrackingId) -> Optional[Order]:
        """Retrieve order by the tracking id handed to the customer.

        Args:
            tracking_id: TrackingId identifier

        Returns:
            Order if found, None otherwise
        """
        pass


class CustomerRepository(ABC):
    """Read-only customer lookup."""

    @abstractmethod
    async def find_customer(self, customer_id: CustomerId) -> Optional[Customer]:
        pass


class RestaurantRepository(ABC):
    """Read-only restaurant catalog lookup."""

    @abstractmethod
    async def find_restaurant_information(self, restaurant: Restaurant) -> Optional[Restaurant]:
        """Fetch a restaurant snapshot.

        Args:
            restaurant: Projection carrying the restaurant id and the ids of
                the products the order asks for

        Returns:
            Restaurant with its active flag and catalog prices, None if unknown
        """
        pass
