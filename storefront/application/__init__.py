"""Application layer - services, use cases, interfaces, and DTOs."""

from .dtos import PlaceOrderRequest, PlacedOrderDTO, PlacedOrderItemDTO
from .interfaces import INotificationService, IdentityResolver
from .services import OrderPlacementEngine, PlacementResult, PostCommitHook
from .use_cases import PlaceOrderUseCase

__all__ = [
    # DTOs
    "PlaceOrderRequest",
    "PlacedOrderDTO",
    "PlacedOrderItemDTO",
    # Services
    "OrderPlacementEngine",
    "PlacementResult",
    "PostCommitHook",
    # Use Cases
    "PlaceOrderUseCase",
    # Interfaces
    "INotificationService",
    "IdentityResolver",
]
