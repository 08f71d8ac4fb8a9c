from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings


class PlacementSettings(BaseSettings):
    """
    Order placement settings.
    Loaded from environment / .env file with exact variable name matching.
    """

    vip_discount_rate: Decimal = Field(
        default=Decimal("0.10"), ge=0, le=1, alias="STOREFRONT_VIP_DISCOUNT_RATE"
    )
    admin_role: str = Field(default="Administrator", alias="STOREFRONT_ADMIN_ROLE")
    notifications_enabled: bool = Field(default=True, alias="STOREFRONT_NOTIFICATIONS_ENABLED")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }
