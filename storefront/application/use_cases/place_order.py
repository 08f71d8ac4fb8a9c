"""
Place Order Use Case.

Entry point for transports (HTTP handler, CLI, message consumer):
resolve who is calling, then delegate to the placement engine.
"""
import logging

from storefront.application.dtos.order_dto import PlaceOrderRequest, PlacedOrderDTO
from storefront.application.interfaces import IdentityResolver
from storefront.application.services.order_placement_service import OrderPlacementEngine


logger = logging.getLogger(__name__)


class PlaceOrderUseCase:
    """Resolve the actor explicitly and place the order."""

    def __init__(self, identity_resolver: IdentityResolver, engine: OrderPlacementEngine):
        """
        Initialize use case with dependencies.

        Args:
            identity_resolver: Maps user id to Actor
            engine: Order placement engine
        """
        self.identity_resolver = identity_resolver
        self.engine = engine

    async def execute(self, request: PlaceOrderRequest) -> PlacedOrderDTO:
        """
        Place the requested order.

        Errors from the engine (OrderNotFound, InvalidState, Unauthorized,
        PersistenceFailure) propagate unchanged.
        """
        actor = await self.identity_resolver.resolve(request.user_id)
        logger.debug(
            f"Resolved user {request.user_id} (administrator: {actor.is_administrator})"
        )
        result = await self.engine.place_order(request.order_id, actor)
        return PlacedOrderDTO.from_result(result)
