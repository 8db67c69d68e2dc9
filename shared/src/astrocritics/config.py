"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Site
    site_url: str = Field(default="http://localhost:3000", alias="SITE_URL")
    cors_origins: str = Field(default="http://localhost:3000", alias="CORS_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    http_timeout_seconds: float = Field(default=30.0, alias="HTTP_TIMEOUT_SECONDS")

    # Ephemeris
    position_provider: str = Field(default="swisseph", alias="POSITION_PROVIDER")
    house_system: str = Field(default="placidus", alias="HOUSE_SYSTEM")
    swisseph_ephe_path: str = Field(default="", alias="SWISSEPH_EPHE_PATH")
    astro_api_url: str = Field(
        default="https://simple-astro-api.netlify.app/api/positions",
        alias="ASTRO_API_URL",
    )

    # Location
    geocoder_url: str = Field(default="https://photon.komoot.io/api", alias="GEOCODER_URL")
    default_timezone: str = Field(default="UTC", alias="DEFAULT_TIMEZONE")

    # LLM (OpenRouter-compatible)
    openrouter_api_key: str = Field(default="", alias="OPENROUTER_API_KEY")
    openrouter_model: str = Field(default="anthropic/claude-3-haiku", alias="OPENROUTER_MODEL")
    openrouter_api_url: str = Field(default="https://openrouter.ai/api/v1", alias="OPENROUTER_API_URL")
    llm_app_title: str = Field(default="Astro Critics - Astrology Chat", alias="LLM_APP_TITLE")
    llm_temperature: float = Field(default=0.7, alias="LLM_TEMPERATURE")
    llm_max_tokens: int = Field(default=200, alias="LLM_MAX_TOKENS")
    llm_top_p: float = Field(default=0.9, alias="LLM_TOP_P")

    # Rate limiting
    redis_url: str = Field(default="redis://localhost:6379/0", alias="REDIS_URL")
    rate_limit_per_hour: int = Field(default=120, alias="RATE_LIMIT_PER_HOUR")
    chat_rate_limit_per_hour: int = Field(default=60, alias="CHAT_RATE_LIMIT_PER_HOUR")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def allowed_origins(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        if self.site_url and self.site_url not in origins:
            origins.append(self.site_url)
        return origins


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
