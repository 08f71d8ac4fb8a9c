from storefront.settings.sections.logging import LoggingSettings
from storefront.settings.sections.placement import PlacementSettings

__all__ = ["LoggingSettings", "PlacementSettings"]
