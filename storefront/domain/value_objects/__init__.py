"""Domain value objects."""

from .value_objects import ExecutionID, Money, MONEY_CONTEXT
from .actor import Actor

__all__ = [
    "Actor",
    "ExecutionID",
    "Money",
    "MONEY_CONTEXT",
]
