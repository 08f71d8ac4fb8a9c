"""Domain services."""

from .discount_policy import DEFAULT_VIP_DISCOUNT_RATE, DiscountPolicy

__all__ = ["DEFAULT_VIP_DISCOUNT_RATE", "DiscountPolicy"]
