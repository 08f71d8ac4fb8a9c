"""Domain events."""

from .base import DomainEvent
from .order_events import OrderPlacedEvent

__all__ = ["DomainEvent", "OrderPlacedEvent"]
