"""Discount policy applied at order placement."""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from ..entities.order import Order


DEFAULT_VIP_DISCOUNT_RATE = Decimal("0.10")


@dataclass(frozen=True)
class DiscountPolicy:
    """
    Maps an order's customer attributes to a discount rate.

    The rate is applied once to the pre-discount subtotal; it is never
    compounded.
    """
    vip_rate: Decimal = DEFAULT_VIP_DISCOUNT_RATE

    def __post_init__(self):
        rate = self.vip_rate
        if isinstance(rate, bool) or not isinstance(rate, (Decimal, int, str)):
            raise ValueError(f"VIP discount rate must be a Decimal, got: {rate!r}")
        try:
            rate = Decimal(rate)
        except InvalidOperation:
            raise ValueError(f"VIP discount rate must be a decimal number, got: {rate!r}") from None
        if not rate.is_finite() or not (0 <= rate <= 1):
            raise ValueError(f"VIP discount rate must be between 0 and 1, got: {rate}")
        object.__setattr__(self, 'vip_rate', rate)

    @classmethod
    def from_settings(cls, settings: Any) -> "DiscountPolicy":
        """Build from any object exposing vip_discount_rate (PlacementSettings)."""
        return cls(vip_rate=settings.vip_discount_rate)

    def rate_for(self, order: Order) -> Decimal:
        """Discount rate for this order; zero for regular customers."""
        if order.is_vip_customer:
            return self.vip_rate
        return Decimal("0")
