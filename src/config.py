"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.models.enums import Language


class SchemeExplorerSettings(BaseSettings):
    """Scheme explorer display settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    default_language: Language = Field(default=Language.EN, description="Language used when none is given")
    combination_preview_limit: int = Field(
        default=10,
        ge=0,
        description="How many combinations the explorer shows (a prefix, not the best ones)",
    )
    max_land_size_acres: Decimal = Field(
        default=Decimal("1000"),
        description="Upper bound of the land-size input for any farmer type",
    )


class LogisticsSettings(BaseSettings):
    """Retailer logistics cost model constants."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    retailer_lat: float = Field(default=20.2961, description="Default retailer latitude (Bhubaneswar)")
    retailer_lng: float = Field(default=85.8245, description="Default retailer longitude (Bhubaneswar)")
    search_radius_km: float = Field(default=300, description="Processors farther than this are not ranked")
    retail_markup: Decimal = Field(default=Decimal("0.15"), description="Markup on purchase price")
    truck_rate_per_km_quintal: Decimal = Field(default=Decimal("2.5"))
    tempo_rate_per_km_quintal: Decimal = Field(default=Decimal("3"))
    handling_cost_per_quintal: Decimal = Field(default=Decimal("50"))
    storage_cost_per_quintal_day: Decimal = Field(default=Decimal("30"))
    max_profit_margin_pct: Decimal = Field(default=Decimal("20"), description="Margin cap, in percent")
    km_per_delivery_day: int = Field(default=150)
    max_delivery_days: int = Field(default=7)


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.schemes.combination_preview_limit
        settings.logistics.retail_markup
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Composed settings (loaded from same .env)
    schemes: SchemeExplorerSettings = Field(default_factory=SchemeExplorerSettings)
    logistics: LogisticsSettings = Field(default_factory=LogisticsSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
