"""Application services."""

from .order_placement_service import (
    OrderPlacementEngine,
    PlacementResult,
    PostCommitHook,
)

__all__ = ["OrderPlacementEngine", "PlacementResult", "PostCommitHook"]
