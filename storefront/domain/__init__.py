"""Domain layer - pure domain models and interfaces."""

from .entities import Order, OrderItem
from .enums import OrderStatus
from .event_bus import EventPublisher
from .events import DomainEvent, OrderPlacedEvent
from .exceptions import (
    ConcurrencyConflict,
    InvalidAmount,
    InvalidFormat,
    InvalidState,
    OrderNotFound,
    OrderPlacementError,
    PersistenceFailure,
    StorefrontError,
    Unauthorized,
)
from .repositories import OrderRepository
from .services import DiscountPolicy
from .value_objects import Actor, ExecutionID, Money

__all__ = [
    "Actor",
    "ConcurrencyConflict",
    "DiscountPolicy",
    "DomainEvent",
    "EventPublisher",
    "ExecutionID",
    "InvalidAmount",
    "InvalidFormat",
    "InvalidState",
    "Money",
    "Order",
    "OrderItem",
    "OrderNotFound",
    "OrderPlacedEvent",
    "OrderPlacementError",
    "OrderRepository",
    "OrderStatus",
    "PersistenceFailure",
    "StorefrontError",
    "Unauthorized",
]
