"""
Configuration settings for the contextual-ai service.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Service
    # ========================================
    app_name: str = Field(
        default="Contextually Personal AI",
        description="Service display name",
    )
    app_description: str = Field(
        default="Human-Centered Intelligence for Africa's Future",
        description="Service tagline shown in the API docs",
    )
    app_version: str = Field(
        default="1.0.0",
        description="Service release version",
    )

    # ========================================
    # Database
    # ========================================
    database_url: str = Field(
        default="sqlite:///./contextual_ai.db",
        description="SQLAlchemy connection string (opened at startup, not used by the adaptation core)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default="logs/contextual_ai.log",
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # API Server
    # ========================================
    api_host: str = Field(
        default="127.0.0.1",
        description="API server host",
    )
    api_port: int = Field(
        default=3000,
        description="API server port",
    )
    api_prefix: str = Field(
        default="/api",
        description="Route prefix for all API endpoints",
    )
    api_version: str = Field(
        default="v1",
        description="API version reported by the health endpoint",
    )
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins",
    )

    # ========================================
    # API Client (used by the CLI 'remote' commands)
    # ========================================
    api_base_url: str = Field(
        default="http://localhost:3000/api",
        description="Base URL of a running contextual-ai API",
    )
    api_timeout_seconds: float = Field(
        default=30.0,
        description="HTTP timeout for API client requests",
    )

    # ========================================
    # Adaptation Models
    # ========================================
    adaptation_model_version: str = Field(
        default="1.0.0",
        description="Version reported in adapter response metadata",
    )
    offline_sync_max_age_hours: float = Field(
        default=24.0,
        description="Hours since last sync after which offline content must resync",
    )

    def get_cors_origins(self) -> list[str]:
        """Get allowed CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def get_adaptation_config(self) -> dict[str, Any]:
        """Get adaptation model configuration as a dictionary."""
        return {
            "model_version": self.adaptation_model_version,
            "offline_sync_max_age_hours": self.offline_sync_max_age_hours,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
