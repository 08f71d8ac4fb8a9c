"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..enums import OrderStatus
from ..events.base import DomainEvent
from ..events.order_events import OrderPlacedEvent
from ..exceptions import InvalidState
from ..value_objects import ExecutionID, Money


@dataclass(frozen=True)
class OrderItem:
    """Individual line item within an order."""
    product_id: str
    price: Money
    quantity: int

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Quantity must be an integer, got: {self.quantity!r}")
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got: {self.quantity}")

    def line_total(self) -> Money:
        """Price times quantity."""
        return self.price.multiply(self.quantity)


@dataclass
class Order:
    """
    Order aggregate root.

    Created externally in Draft status. The placement engine is the only
    writer of status and total_value in this core.
    """
    order_id: str
    customer_id: str
    items: List[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.DRAFT
    total_value: Optional[Money] = None
    is_vip_customer: bool = False

    # Optimistic concurrency token, maintained by repositories
    version: int = 0

    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.status, OrderStatus):
            self.status = OrderStatus(self.status)

    @property
    def is_draft(self) -> bool:
        return self.status == OrderStatus.DRAFT

    def add_item(self, item: OrderItem) -> None:
        """Add item. Only Draft orders can change their lines."""
        if not self.is_draft:
            raise InvalidState(
                "order must be in Draft status", order_id=self.order_id, status=self.status
            )
        self.items.append(item)

    def ensure_placeable(self) -> None:
        """
        Check the order-side placement preconditions.

        Raises:
            InvalidState: not Draft, or no items
        """
        if not self.is_draft:
            raise InvalidState(
                "order must be in Draft status", order_id=self.order_id, status=self.status
            )
        if not self.items:
            raise InvalidState(
                "order must have at least one item", order_id=self.order_id, status=self.status
            )

    def calculate_subtotal(self) -> Money:
        """Sum of line totals, accumulated left to right from zero."""
        subtotal = Money.zero()
        for item in self.items:
            subtotal = subtotal.add(item.line_total())
        return subtotal

    def place(self, total: Money, execution_id: Optional[ExecutionID] = None) -> None:
        """
        Business rule: Draft -> Placed with a fixed total.

        Records OrderPlacedEvent.
        """
        self.ensure_placeable()

        self.total_value = total
        self.status = OrderStatus.PLACED

        self._record_event(
            OrderPlacedEvent(
                order_id=str(self.order_id),
                customer_id=self.customer_id,
                total_amount=total.amount,
                execution_id=str(execution_id) if execution_id else None,
            )
        )

    def revert_placement(self) -> None:
        """Undo an in-memory place() whose save did not succeed."""
        self.total_value = None
        self.status = OrderStatus.DRAFT
        self.clear_domain_events()

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """
        Get all domain events collected by this aggregate.

        Returns:
            Copy of the pending events list
        """
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear all collected domain events (after publishing)."""
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
