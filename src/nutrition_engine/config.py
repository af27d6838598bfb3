"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    spoonacular_api_key: str
    spoonacular_base_url: str = "https://api.spoonacular.com"
    cache_table: str = "nutrition_cache"
    cache_ttl_seconds: int = 30 * 86400
    external_min_interval_seconds: float = 1.1
    external_rate_limit_cooldown_seconds: float = 60.0
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
