"""Repository ports."""
from .order_repository import CustomerRepository, OrderRepository, RestaurantRepository

__all__ = ["CustomerRepository", "OrderRepository", "RestaurantRepository"]
