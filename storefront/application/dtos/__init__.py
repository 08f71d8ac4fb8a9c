"""Application DTOs."""

from .order_dto import PlaceOrderRequest, PlacedOrderDTO, PlacedOrderItemDTO

__all__ = ["PlaceOrderRequest", "PlacedOrderDTO", "PlacedOrderItemDTO"]
