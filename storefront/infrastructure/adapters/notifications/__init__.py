"""Notification adapters."""

from .logging_notification_service import LoggingNotificationService
from .mock_notification_service import MockNotificationService

__all__ = ["LoggingNotificationService", "MockNotificationService"]
