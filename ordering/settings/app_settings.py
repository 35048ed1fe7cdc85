from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class OrderingSettings(BaseSettings):
    """
    Settings for the ordering service.
    Loaded automatically from .env with prefix ORDERING_*
    """

    environment: str = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Currency of the total for an order with no items
    default_currency: str = Field(default="JPY", pattern=r"^[A-Z]{3}$")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "ORDERING_",
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> OrderingSettings:
    """Return cached settings for the entire app."""
    return OrderingSettings()
