"""
Centralized configuration management using Pydantic Settings.

This module provides type-safe configuration management with validation,
loading settings from environment variables and .env files.
"""

import json
import logging
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    (e.g. DATABASE_URL, LOG_LEVEL, CORS_ORIGINS).
    """

    # API Configuration
    api_prefix: str = Field(
        default="/api",
        description="Prefix for all API endpoints"
    )
    project_name: str = Field(
        default="Car Registry API",
        description="Project name displayed in API docs"
    )

    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/cars.db",
        description="Database connection URL (SQLite by default, PostgreSQL-ready format)"
    )
    db_create_all: bool = Field(
        default=True,
        description="Create missing tables at startup"
    )
    db_echo: bool = Field(
        default=False,
        description="Echo SQL statements (debug only)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )
    log_json: bool = Field(
        default=True,
        description="Emit structured JSON logs instead of plain text"
    )

    # CORS Configuration
    # NoDecode: the validator below handles both JSON and comma-separated values
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins (frontend URLs)"
    )
    cors_allow_credentials: bool = Field(
        default=True,
        description="Allow cookies/credentials in CORS requests"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | List[str]) -> List[str]:
        """
        Parse cors_origins from JSON string or list.

        Supports comma-separated origins for easier .env configuration.
        """
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """
        Validate database URL format.

        Supports SQLite and PostgreSQL with their async drivers.
        """
        if not v or v.strip() == "":
            raise ValueError("DATABASE_URL is required and cannot be empty")

        valid_schemes = ["sqlite", "sqlite+aiosqlite", "postgresql", "postgresql+asyncpg"]
        if not any(v.startswith(scheme + "://") for scheme in valid_schemes):
            raise ValueError(
                f"DATABASE_URL must start with one of: {', '.join(valid_schemes)}. "
                f"Got: {v[:20]}..."
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level and reject unknown names."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got: {v}")
        return level


# Global settings instance
# Import this instance throughout the application
settings = Settings()
