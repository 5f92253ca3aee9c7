"""
Domain Event Publisher Interface (Domain Layer).

Pure interface definition - no implementation details.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .events.base import DomainEvent


E = TypeVar("E", bound=DomainEvent)


class DomainEventPublisher(ABC, Generic[E]):
    """
    Publishes domain events to whoever listens.

    Implemented in the infrastructure layer (in-process bus, message broker).
    Fire-and-forget from the caller's point of view.
    """

    @abstractmethod
    async def publish(self, event: E) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        pass
