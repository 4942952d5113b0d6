"""
Settings — pydantic-settings model, overridable from the environment.

Environment variables use the `ORDERTAKING_` prefix and `__` for nesting:

    ORDERTAKING_LOGGING__LEVEL=DEBUG
    ORDERTAKING_PRICING__DEFAULT_PRODUCT_PRICE=12.50
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

# ═══════════════════════════════════════════════════════════════════════════════
# Sub-configs
# ═══════════════════════════════════════════════════════════════════════════════

class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "console"


# Within the range a Price accepts
PriceValue = Annotated[Decimal, Field(ge=0, le=1000)]


class PricingConfig(BaseModel):
    """Price lists used by the stand-alone price collaborators."""

    default_product_price: PriceValue = Decimal("10.00")
    product_prices: dict[str, PriceValue] = Field(default_factory=dict)
    # promotion code → product code → price
    promotions: dict[str, dict[str, PriceValue]] = Field(default_factory=dict)


class HttpConfig(BaseModel):
    route_path: str = "/orders"
    title: str = "Order Taking"


# ═══════════════════════════════════════════════════════════════════════════════
# Settings
# ═══════════════════════════════════════════════════════════════════════════════

class Settings(BaseSettings):
    """Everything configurable about a running ordertaking service."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)

    model_config = {"env_prefix": "ORDERTAKING_", "env_nested_delimiter": "__"}


def load_settings(overrides: dict[str, Any] | None = None) -> Settings:
    """Environment first, then `overrides` on top."""
    return Settings(**(overrides or {}))


__all__ = (
    "LoggingConfig",
    "PricingConfig",
    "HttpConfig",
    "Settings",
    "load_settings",
)
