"""
Order Domain Events.

Events that occur during the order lifecycle.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .base import DomainEvent


@dataclass
class OrderPlacedEvent(DomainEvent):
    """
    Order moved from Draft to Placed.

    Trigger: OrderPlacementEngine after the order has been saved
    Consumers: fulfillment, analytics
    """

    order_id: str = ""
    customer_id: str = ""
    total_amount: Optional[Decimal] = None

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            self.aggregate_id = self.order_id
        if self.total_amount is not None and not isinstance(self.total_amount, Decimal):
            self.total_amount = Decimal(str(self.total_amount))
        super().__post_init__()
