"""
Event Bus Implementation (Infrastructure Layer).

In-process publisher that notifies subscribers of domain events.
Can be replaced with a message broker without touching the use cases.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Type, Union

from food_ordering.domain.event_publisher import DomainEventPublisher
from food_ordering.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]


class InMemoryEventBus(DomainEventPublisher[DomainEvent]):
    """
    In-Memory Event Bus Implementation.

    Features:
    - Notifies registered subscribers in subscription order
    - Subscribers may filter on an event class (subclasses included)
    - Supports sync and async handlers
    - Records every published event (``to_dict`` form) before notifying

    A failing subscriber is logged and does not stop the others; publishing
    is fire-and-forget for the caller.
    """

    def __init__(self):
        """Initialize event bus with no subscribers and an empty event record."""
        self._subscribers: List[Tuple[Optional[Type[DomainEvent]], EventHandler]] = []
        self._stored_events: List[Dict[str, Any]] = []

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event to every matching subscriber.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")

        self._stored_events.append(event.to_dict())
        logger.debug(f"Event stored: {event.event_type} ({event.event_id})")

        await self._notify_subscribers(event)

    def get_stored_events(self) -> List[Dict[str, Any]]:
        """Return the records of all published events, oldest first."""
        return list(self._stored_events)

    def subscribe(self, handler: EventHandler, event_type: Optional[Type[DomainEvent]] = None) -> None:
        """
        Subscribe to domain events.

        Args:
            handler: Callback that receives events
            event_type: Only deliver events of this class; all events if None
        """
        self._subscribers.append((event_type, handler))
        logger.info(f"Registered event subscriber: {_handler_name(handler)}")

    def unsubscribe(self, handler: EventHandler) -> None:
        """
        Unsubscribe a handler from all event types.

        Args:
            handler: Callback to remove
        """
        self._subscribers = [(t, h) for t, h in self._subscribers if h != handler]
        logger.info(f"Unregistered event subscriber: {_handler_name(handler)}")

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        """Notify all matching subscribers about an event."""
        subscribers = [h for t, h in self._subscribers if t is None or isinstance(event, t)]
        if not subscribers:
            return

        logger.debug(f"Notifying {len(subscribers)} subscribers about {event.event_type}")

        for subscriber in subscribers:
            try:
                result = subscriber(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(f"Subscriber {_handler_name(subscriber)} failed: {e}", exc_info=True)


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
