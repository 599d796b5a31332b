"""
Client configuration using Pydantic Settings.
Loads from MOJANG_* environment variables with fallbacks.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings loaded from environment."""

    # Service hosts
    STATUS_HOST: str = "https://status.mojang.com"
    API_HOST: str = "https://api.mojang.com"
    SESSION_HOST: str = "https://sessionserver.mojang.com"
    AUTH_HOST: str = "https://authserver.mojang.com"
    SERVICES_HOST: str = "https://api.minecraftservices.com"

    # Transport
    TIMEOUT: float = 20.0
    RETRIES: int = 1  # attempts, 1 means no retry
    BACKOFF: float = 2.0
    USER_AGENT: str = "mojang-api-client/1.0"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_prefix = "MOJANG_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
