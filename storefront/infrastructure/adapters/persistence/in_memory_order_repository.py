"""
In-Memory Order Repository Implementation.

Stores copies of orders so that every caller works on its own instance,
and rejects stale writes with an optimistic version check.
"""
from copy import deepcopy
from typing import Dict, List, Optional
import logging

from storefront.domain.entities.order import Order
from storefront.domain.exceptions import ConcurrencyConflict
from storefront.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    save() succeeds only if the stored version still equals the version the
    order was loaded with; it then bumps the version. Two callers that both
    load a Draft order cannot both persist it as Placed.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, Order] = {}
        logger.info("InMemoryOrderRepository initialized")

    def add(self, order: Order) -> None:
        """Seed an order (externally created Draft orders, tests, demos)."""
        order.version = 0
        self._storage[order.order_id] = self._snapshot(order)

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """
        Get a private copy of the order.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order if found, None otherwise
        """
        stored = self._storage.get(order_id)
        if stored is None:
            logger.info(f"Order not found in repository: {order_id}")
            return None
        return self._snapshot(stored)

    async def save(self, order: Order) -> None:
        """
        Persist order if nobody else wrote it since it was loaded.

        Raises:
            ConcurrencyConflict: stored version differs from order.version
        """
        stored = self._storage.get(order.order_id)
        current_version = stored.version if stored is not None else 0

        if stored is not None and current_version != order.version:
            raise ConcurrencyConflict(order.order_id, order.version, current_version)

        order.version = current_version + 1
        self._storage[order.order_id] = self._snapshot(order)
        logger.info(
            f"Order saved: {order.order_id} "
            f"(status: {order.status.value}, version: {order.version})"
        )

    def get_all(self) -> List[Order]:
        """Copies of all stored orders (for demo/testing)."""
        return [self._snapshot(order) for order in self._storage.values()]

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        self._storage.clear()

    @staticmethod
    def _snapshot(order: Order) -> Order:
        copy = deepcopy(order)
        copy.clear_domain_events()
        return copy
