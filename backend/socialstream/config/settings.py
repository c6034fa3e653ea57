"""
Application Settings

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.

Configuration Categories:
=========================
- Application: Basic app info (name, version, debug mode)
- Server: Host and port settings
- Store: Key-value backend, namespace and demo seed
- Accounts: Password policy, points reward, avatar/email synthesis
- External Services: OpenAI

Environment Variables:
======================
Settings are loaded from environment variables or .env file.
Environment variables take precedence over .env file values.

Usage:
======
    from socialstream.config.settings import settings

    # Access settings
    redis_url = settings.REDIS_URL
    is_dev = settings.is_development
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # APPLICATION
    # ═══════════════════════════════════════════════════════════════════════════════

    APP_NAME: str = "SocialStream"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════════════════════════
    # SERVER
    # ═══════════════════════════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # STORE
    # ═══════════════════════════════════════════════════════════════════════════════

    STORE_BACKEND: Literal["redis", "memory"] = Field(
        default="redis",
        description="Key-value substrate holding the collections",
    )
    REDIS_URL: str = Field(
        default="redis://localhost:6379",
        description="Redis connection URL for the collection store",
    )
    STORE_NAMESPACE: str = Field(
        default="socialstream",
        description="Key prefix for every collection key",
    )
    SEED_DEMO_CONTENT: bool = Field(
        default=True,
        description="Serve the welcome post while the posts collection is empty",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # ACCOUNTS & REWARDS
    # ═══════════════════════════════════════════════════════════════════════════════

    MIN_PASSWORD_LENGTH: int = 6
    BCRYPT_ROUNDS: int = Field(
        default=12,
        ge=4,
        le=31,
        description="bcrypt work factor for password hashes",
    )
    POINTS_PER_POST: int = 10
    LEADERBOARD_SIZE: int = 10
    SESSION_COOKIE_NAME: str = Field(
        default="socialstream_session",
        description="Cookie carrying the session id issued at login",
    )
    EMAIL_DOMAIN: str = "socialstream.tr"
    AVATAR_URL_TEMPLATE: str = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"

    # ═══════════════════════════════════════════════════════════════════════════════
    # EXTERNAL SERVICES - OpenAI
    # ═══════════════════════════════════════════════════════════════════════════════

    OPENAI_API_KEY: str = Field(
        default="",
        description="OpenAI API key for tagging and room chat",
    )
    OPENAI_MODEL: str = "gpt-4o-mini"
    AI_TIMEOUT_SECONDS: float = Field(
        default=15.0,
        description="Upper bound for a single tagging or chat request",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


# Global settings instance for convenient import
settings = get_settings()
