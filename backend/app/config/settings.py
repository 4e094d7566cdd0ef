"""
Application Settings for SlugSpace

Centralized configuration using Pydantic Settings with .env support.
All environment variables are validated at startup.
"""

from functools import lru_cache
from typing import Optional
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    REDIS_URL is optional: without it recommendation caching is disabled
    and every request is scored fresh.
    """

    # Application Settings
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS Configuration
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Auth (session JWTs issued by the web frontend)
    jwt_secret: Optional[str] = None
    jwt_algorithm: str = "HS256"

    # Recommendations
    default_recommendation_limit: int = 10
    max_recommendation_limit: int = 50
    recommendation_cache_ttl_seconds: int = 300

    # Redis Cache
    redis_url: Optional[str] = None
    cache_key_prefix: str = "slugspace"

    # Database Configuration (SQLModel/SQLAlchemy)
    database_url: Optional[str] = None
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_pool_timeout: int = 30
    database_echo: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Keep the recommendation limit defaults consistent."""
        if self.max_recommendation_limit < 1:
            raise ValueError("MAX_RECOMMENDATION_LIMIT must be at least 1")
        if not 1 <= self.default_recommendation_limit <= self.max_recommendation_limit:
            raise ValueError(
                "DEFAULT_RECOMMENDATION_LIMIT must be between 1 and MAX_RECOMMENDATION_LIMIT"
            )
        if self.is_production and not self.jwt_secret:
            raise ValueError("JWT_SECRET required when ENVIRONMENT=production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment.lower() == "development"

    @property
    def async_database_url(self) -> Optional[str]:
        """DATABASE_URL rewritten for the asyncpg driver."""
        url = self.database_url
        if not url:
            return None
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        return url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export for direct import
settings = get_settings()
