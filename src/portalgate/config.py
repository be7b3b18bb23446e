"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PORTAL_",
        case_sensitive=False,
    )

    # Sessions
    session_secret: str = Field(
        default="change-me-portal-session-secret",
        description="HMAC secret used to sign session tokens",
    )
    session_ttl_hours: float = Field(default=24.0, gt=0, description="Session lifetime in hours")
    session_file: Path = Field(
        default=Path.home() / ".portalgate" / "session.json",
        description="Where the CLI keeps its session record",
    )

    # Simulated authentication
    demo_password: str = Field(default="admin123", description="Shared demo credential")
    login_delay_seconds: float = Field(
        default=1.0, ge=0, description="Artificial login round-trip delay"
    )
    new_user_status: Literal["active", "pending"] = Field(
        default="active",
        description="Status given to users created by an administrator",
    )

    # Catalog
    market_forecast_url: str = Field(
        default="http://localhost:3000",
        description="Launch URL of the Market Forecast application",
    )
    seed_demo_data: bool = Field(default=True, description="Load demo users and chat")

    # HTTP
    cors_origins: str = Field(
        default="http://localhost:5173",
        description="Comma separated list of allowed origins",
    )
    host: str = Field(default="127.0.0.1", description="Bind address for `serve`")
    port: int = Field(default=8000, description="Bind port for `serve`")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
