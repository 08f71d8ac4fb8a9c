"""
Logging infrastructure.

Provides logging utilities for the infrastructure layer.
"""
import logging
from typing import Optional

from storefront.settings.sections.logging import LoggingSettings


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure the ``storefront`` logger tree from settings.

    Args:
        settings: Logging settings (loaded from environment if omitted)
    """
    settings = settings or LoggingSettings()
    root = logging.getLogger("storefront")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.format))
        root.addHandler(handler)
    root.setLevel(settings.level.upper())


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger
