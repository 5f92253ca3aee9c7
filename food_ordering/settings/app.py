# food_ordering/settings/app.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator

from food_ordering.settings.base import OrderServiceBaseSettings


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class OrderServiceSettings(OrderServiceBaseSettings):
    """
    Order service settings.
    Loaded from the environment / .env file with exact variable name matching.
    """

    log_level: str = Field("INFO", alias="ORDER_SERVICE_LOG_LEVEL")
    payment_request_topic_name: str = Field(
        "payment-request", alias="ORDER_SERVICE_PAYMENT_REQUEST_TOPIC_NAME"
    )
    order_created_message: Optional[str] = Field(
        "Order created successfully", alias="ORDER_SERVICE_ORDER_CREATED_MESSAGE"
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> OrderServiceSettings:
    """Return cached global settings for the entire app."""
    return OrderServiceSettings()
