# =============================================
# jobtracker/config/settings.py
# =============================================
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import List
from functools import lru_cache
import logging

ASYNC_DRIVERS = ("sqlite+aiosqlite://", "postgresql+asyncpg://")


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =============================================
    # APP CONFIGURATION
    # =============================================
    APP_NAME: str = Field(default="Job Search Tracker API", description="Application name")
    VERSION: str = Field(default="1.0.0", description="Application version")
    DEBUG: bool = Field(default=False, description="Debug mode")
    ENVIRONMENT: str = Field(default="development", description="Environment name")

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        valid_envs = ["development", "testing", "staging", "production"]
        if v not in valid_envs:
            raise ValueError(f"ENVIRONMENT must be one of: {valid_envs}")
        return v

    # =============================================
    # DATABASE CONFIGURATION
    # =============================================
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./jobtracker.db",
        description="Async SQLAlchemy database URL",
    )
    DATABASE_ECHO: bool = Field(default=False, description="Echo SQL statements")

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v):
        if not v.startswith(ASYNC_DRIVERS):
            raise ValueError(f"DATABASE_URL must use an async driver: {list(ASYNC_DRIVERS)}")
        return v

    # =============================================
    # CLIENT CONFIGURATION
    # =============================================
    API_BASE_URL: str = Field(
        default="http://localhost:8000",
        description="Externally reachable API base URL used by the client",
    )

    # =============================================
    # CORS CONFIGURATION
    # =============================================
    ALLOWED_HOSTS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed origins for CORS",
    )

    # =============================================
    # LOGGING CONFIGURATION
    # =============================================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()


# =============================================
# SETTINGS INSTANCE
# =============================================
@lru_cache()
def get_settings() -> Settings:
    """Get settings instance (cached)"""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings"""
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
