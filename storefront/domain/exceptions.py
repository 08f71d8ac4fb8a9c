"""
Domain exceptions.

Raised by the domain and application layers when business rules are
violated. Callers (API layer, CLI, tests) catch these and translate them
into user-visible failures. None of them are retried internally.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from typing import Any, Optional


class StorefrontError(Exception):
    """Base class for all storefront errors."""


# =============================================================================
# MONEY
# =============================================================================

class MoneyError(StorefrontError, ValueError):
    """Base class for monetary value errors."""


class InvalidFormat(MoneyError):
    """Text is not a valid culture-invariant decimal numeral."""

    def __init__(self, text: Any):
        self.text = text
        super().__init__(f"Amount must be a valid decimal number, got: {text!r}")


class InvalidAmount(MoneyError):
    """Amount is negative or not a finite number."""

    def __init__(self, amount: Any, reason: str = "Amount cannot be negative"):
        self.amount = amount
        super().__init__(f"{reason}: {amount}")


# =============================================================================
# ORDER PLACEMENT
# =============================================================================

class OrderPlacementError(StorefrontError):
    """Base class for order placement failures."""

    def __init__(self, message: str, order_id: Optional[Any] = None):
        self.order_id = order_id
        super().__init__(message)


class OrderNotFound(OrderPlacementError):
    """The requested order does not exist."""

    def __init__(self, order_id: Any):
        super().__init__(f"Order not found: {order_id}", order_id=order_id)


class InvalidState(OrderPlacementError):
    """The order is not in a state that allows the requested operation."""

    def __init__(self, message: str, order_id: Any = None, status: Any = None):
        self.status = status
        super().__init__(message, order_id=order_id)


class Unauthorized(OrderPlacementError):
    """The actor is neither the order's customer nor an administrator."""

    def __init__(self, order_id: Any, actor_id: str):
        self.actor_id = actor_id
        super().__init__(
            "Order can only be placed by the same customer or an administrator "
            f"(order: {order_id}, actor: {actor_id})",
            order_id=order_id,
        )


class PersistenceFailure(OrderPlacementError):
    """Saving the order failed; the placement did not become durable."""


class ConcurrencyConflict(PersistenceFailure):
    """The order was modified by another writer since it was loaded."""

    def __init__(self, order_id: Any, expected_version: int, actual_version: int):
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Order {order_id} was modified concurrently "
            f"(expected version {expected_version}, found {actual_version})",
            order_id=order_id,
        )
