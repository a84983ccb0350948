"""
memocache Configuration

Configuration management with environment variable support.
Selects the default cache backend and its Redis connection settings.
"""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Cache settings with validation and safe defaults."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    # Backend selection
    CACHE_BACKEND: str = Field(
        default="memory", description="Default cache store backend (memory or redis)"
    )

    # Redis configuration
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0", description="Redis connection URL"
    )
    REDIS_MAX_CONNECTIONS: int = Field(
        default=10, ge=1, le=100, description="Redis connection pool size"
    )
    REDIS_CONNECTION_TIMEOUT: float = Field(
        default=5.0, gt=0, le=60, description="Redis connect timeout in seconds"
    )
    REDIS_OPERATION_TIMEOUT: float = Field(
        default=5.0, gt=0, le=60, description="Redis command timeout in seconds"
    )

    @field_validator("CACHE_BACKEND")
    @classmethod
    def validate_cache_backend(cls, v):
        """Validate cache backend name."""
        allowed = ["memory", "redis"]
        if v.lower() not in allowed:
            raise ValueError(f"CACHE_BACKEND must be one of: {allowed}")
        return v.lower()

    @field_validator("REDIS_URL")
    @classmethod
    def validate_redis_url(cls, v):
        """Validate Redis URL format."""
        if not v.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError("REDIS_URL must be a redis://, rediss:// or unix:// URL")
        return v

    @property
    def uses_redis(self) -> bool:
        """Check if the default backend is Redis."""
        return self.CACHE_BACKEND == "redis"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
