"""Application DTOs for Order placement."""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from storefront.application.services.order_placement_service import PlacementResult


class PlaceOrderRequest(BaseModel):
    """Request DTO for placing an order."""

    order_id: str = Field(..., min_length=1, description="Order identifier")
    user_id: str = Field(..., min_length=1, description="Authenticated user identifier")

    model_config = {"frozen": True}


class PlacedOrderItemDTO(BaseModel):
    """DTO for a placed order line."""

    product_id: str = Field(..., description="Product identifier")
    price_amount: Decimal = Field(..., ge=0, description="Unit price")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    line_total_amount: Decimal = Field(..., ge=0, description="Price times quantity")

    model_config = {"frozen": True}


class PlacedOrderDTO(BaseModel):
    """Response DTO for a placed order."""

    order_id: str = Field(..., description="Order identifier")
    customer_id: str = Field(..., description="Customer identifier")
    status: str = Field(..., description="Order status")
    items: List[PlacedOrderItemDTO] = Field(default_factory=list, description="Order lines")
    subtotal_amount: Decimal = Field(..., ge=0, description="Total before discount")
    discount_amount: Decimal = Field(..., ge=0, description="VIP discount")
    total_amount: Decimal = Field(..., ge=0, description="Total order amount")
    execution_id: str = Field(..., description="Execution ID for tracing")
    notified: bool = Field(..., description="All post-placement notifications succeeded")

    model_config = {"frozen": True}

    @classmethod
    def from_result(cls, result: PlacementResult) -> "PlacedOrderDTO":
        order = result.order
        return cls(
            order_id=str(order.order_id),
            customer_id=order.customer_id,
            status=order.status.value,
            items=[
                PlacedOrderItemDTO(
                    product_id=str(item.product_id),
                    price_amount=item.price.amount,
                    quantity=item.quantity,
                    line_total_amount=item.line_total().amount,
                )
                for item in order.items
            ],
            subtotal_amount=result.subtotal.amount,
            discount_amount=result.discount.amount,
            total_amount=result.total.amount,
            execution_id=str(result.execution_id),
            notified=result.notified,
        )
