"""
Base Domain Event.

All domain events inherit from this base class.
Events are immutable records of something that happened to an aggregate.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict
import uuid


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    Subclasses add their payload as dataclass fields, implement
    ``occurred_at`` and override ``aggregate_id`` and ``_get_event_data``.
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()), kw_only=True)
    event_version: int = field(default=1, kw_only=True)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    @property
    def aggregate_type(self) -> str:
        """
        Extract aggregate type from event type.

        Example: OrderCreatedEvent -> Order
        """
        event_name = self.event_type

        # Remove 'Event' suffix
        if event_name.endswith('Event'):
            event_name = event_name[:-5]

        # Extract aggregate name (first word before action)
        for i, char in enumerate(event_name):
            if i > 0 and char.isupper():
                return event_name[:i]

        return event_name

    @property
    def aggregate_id(self) -> str:
        return ""

    @property
    @abstractmethod
    def occurred_at(self) -> datetime:
        """When the event happened (UTC)."""

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to a JSON-friendly dictionary.

        Used by the event bus to record every published event.
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "event_version": self.event_version,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Event payload; override in subclasses."""
        return {}
