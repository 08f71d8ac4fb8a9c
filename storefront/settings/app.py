# storefront/settings/app.py
from functools import lru_cache

from storefront.settings.sections.logging import LoggingSettings
from storefront.settings.sections.placement import PlacementSettings


class AppSettings:
    """
    Central application settings aggregator.
    Settings are loaded lazily inside __init__
    to prevent eager evaluation at import time.
    """

    def __init__(self):
        self.placement = PlacementSettings()
        self.logging = LoggingSettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
