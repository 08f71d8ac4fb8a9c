"""
Mock Notification Service Implementation.

This simulates notifications for testing and demos.
"""
import logging

from storefront.application.interfaces import INotificationService
from storefront.domain.entities.order import Order


logger = logging.getLogger(__name__)


class MockNotificationService(INotificationService):
    """
    Mock implementation of notification service.

    Records notifications instead of actually sending them.
    """

    def __init__(self):
        """Initialize mock notification service."""
        self.notifications_sent = []

    async def send_order_confirmation(self, order: Order) -> None:
        """
        Record an order confirmation.

        Args:
            order: Placed order
        """
        notification = {
            "type": "order_confirmation",
            "order_id": order.order_id,
            "customer_id": order.customer_id,
            "total": str(order.total_value) if order.total_value else None,
        }
        self.notifications_sent.append(notification)
        logger.info(f"Recorded order confirmation for order {order.order_id}")

    def get_notifications(self) -> list:
        """Get all sent notifications (for testing)."""
        return list(self.notifications_sent)

    def clear(self) -> None:
        """Clear notifications (for testing)."""
        self.notifications_sent.clear()
