# Settings package
from storefront.settings.app import AppSettings, get_app_settings
from storefront.settings.sections import LoggingSettings, PlacementSettings

__all__ = ["get_app_settings", "AppSettings", "LoggingSettings", "PlacementSettings"]
