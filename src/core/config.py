"""Application configuration management using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="orders-backend", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed CORS origins",
    )

    # Analytics
    analytics_cache_ttl: int = Field(default=60, ge=0, description="Analytics cache TTL in seconds")
    analytics_cache_cleanup_interval: int = Field(
        default=300, gt=0, description="Seconds between expired-entry sweeps"
    )

    # Promotions
    promotion_rules: str = Field(
        default="first_order,high_value,loyalty,vip",
        description="Comma-separated promotion rule keys, in evaluation order",
    )

    # Demo data
    seed_demo_data: bool | None = Field(
        default=None,
        description="Seed demo profiles and orders at startup. Auto-enabled outside production.",
    )

    @model_validator(mode="after")
    def set_seed_demo_data_default(self) -> "Settings":
        """Default demo seeding from the environment if SEED_DEMO_DATA is not set.

        Production never seeds unless explicitly asked to.
        """
        if self.seed_demo_data is None:
            self.seed_demo_data = self.app_env != "production"
        return self

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def promotion_rules_list(self) -> list[str]:
        """Parse promotion rule keys into a list, keeping their order."""
        return [rule.strip() for rule in self.promotion_rules.split(",") if rule.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
