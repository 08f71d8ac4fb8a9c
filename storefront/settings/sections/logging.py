from pydantic import Field
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    """
    Logging settings.
    Loaded from environment / .env file with exact variable name matching.
    """

    level: str = Field(default="INFO", alias="STOREFRONT_LOG_LEVEL")
    format: str = Field(
        default="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        alias="STOREFRONT_LOG_FORMAT",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }
