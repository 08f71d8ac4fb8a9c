"""Application layer interfaces."""
from abc import ABC, abstractmethod

from storefront.domain.entities.order import Order
from storefront.domain.value_objects import Actor


class INotificationService(ABC):
    """
    Interface for customer notification operations.

    This interface defines the contract for sending notifications,
    allowing different implementations (email, Slack, webhook, etc.)
    """

    @abstractmethod
    async def send_order_confirmation(self, order: Order) -> None:
        """
        Send order confirmation for a placed order.

        Args:
            order: Placed order (status, total_value set)
        """
        pass


class IdentityResolver(ABC):
    """
    Interface for resolving the calling user into an Actor.

    Authentication happens before this; the resolver only maps an
    authenticated user id to its identifier and administrator flag.
    """

    @abstractmethod
    async def resolve(self, user_id: str) -> Actor:
        """
        Resolve user id to Actor.

        Args:
            user_id: Authenticated user identifier

        Returns:
            Actor with is_administrator derived from role membership
        """
        pass


__all__ = ["INotificationService", "IdentityResolver"]
