"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order


class OrderRepository(ABC):
    """
    Abstract repository for Order aggregate persistence.

    Implementations serialize writers per order (optimistic version check
    or a per-order lock) so two callers cannot both place the same order.
    """

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Persist order aggregate.

        Args:
            order: Order aggregate to persist

        Raises:
            PersistenceFailure: the write did not become durable
        """
        pass
