"""
Order Status Enum.

Lifecycle of an order. This core only performs DRAFT -> PLACED;
SHIPPED and DELIVERED belong to fulfillment workflows.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""

    DRAFT = "Draft"
    PLACED = "Placed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
