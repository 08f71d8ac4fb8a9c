"""
Logging Notification Service Implementation.

Stands in for the e-mail gateway: writes the confirmation to the log.
"""
import logging

from storefront.application.interfaces import INotificationService
from storefront.domain.entities.order import Order
from storefront.settings.sections.placement import PlacementSettings


logger = logging.getLogger(__name__)


class LoggingNotificationService(INotificationService):
    """Logs order confirmation e-mails instead of sending them."""

    def __init__(self, settings: PlacementSettings):
        """
        Initialize logging notification service.

        Args:
            settings: Placement settings (notifications_enabled switch)
        """
        self.enabled = settings.notifications_enabled

    async def send_order_confirmation(self, order: Order) -> None:
        """Log the confirmation e-mail for a placed order."""
        if not self.enabled:
            logger.debug(f"Notifications disabled, skipping confirmation for order {order.order_id}")
            return

        logger.info(
            f"Sending order confirmation e-mail for order with ID {order.order_id} "
            f"(customer: {order.customer_id}, total: {order.total_value})"
        )
