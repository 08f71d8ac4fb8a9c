"""Infrastructure layer - adapters, event bus and logging."""

from .event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
