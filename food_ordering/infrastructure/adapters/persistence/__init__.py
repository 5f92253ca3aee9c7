from .in_memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryRestaurantRepository,
)

__all__ = [
    "InMemoryCustomerRepository",
    "InMemoryOrderRepository",
    "InMemoryRestaurantRepository",
]
