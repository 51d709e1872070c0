"""Application configuration using Pydantic Settings"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MATCHMAKER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")

    # Server Configuration
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=3000, description="Server port")
    frontend_url: str = Field(default="http://localhost:5173", description="Frontend URL for CORS")

    # Heartbeat
    enable_heartbeat: bool = Field(default=True, description="Enable periodic heartbeat log")
    heartbeat_interval: int = Field(default=300, ge=1, description="Heartbeat interval in seconds")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level name; unknown names fall back to INFO"""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            logger.warning(f"Unknown MATCHMAKER_LOG_LEVEL {v!r}, using INFO")
            return "INFO"
        return level

    @property
    def cors_origins(self) -> list[str]:
        """Get CORS allowed origins"""
        return [self.frontend_url]

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
