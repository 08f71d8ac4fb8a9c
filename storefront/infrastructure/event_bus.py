"""
Event Bus Implementation (Infrastructure Layer).

Delivers domain events to in-process subscribers.
"""
import logging
from collections.abc import Awaitable, Callable
from typing import Dict, List

from storefront.domain.event_bus import EventPublisher
from storefront.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class InMemoryEventBus(EventPublisher):
    """
    In-Memory Event Bus Implementation.

    - Notifies handlers subscribed to an event type, in subscription order
    - Handler errors are logged, never raised to the publisher
    - Keeps every published event (for testing/demos)

    Can be replaced with a message broker adapter implementing EventPublisher.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._published: List[DomainEvent] = []

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """Subscribe an async handler to an event type (class name)."""
        self._handlers.setdefault(event_type, []).append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")
        self._published.append(event)

        for handler in self._handlers.get(event.event_type, []):
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    f"Event handler {handler!r} failed for {event.event_type}: {e}",
                    exc_info=True,
                )

    @property
    def published_events(self) -> List[DomainEvent]:
        """Copy of all published events."""
        return list(self._published)

    def clear(self) -> None:
        """Forget published events (for testing)."""
        self._published.clear()
