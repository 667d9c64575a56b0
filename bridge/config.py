# =============================================================================
# bridge/config.py - Library Settings
# =============================================================================
# Loads configuration from environment variables using pydantic-settings.
#
# Usage:
#   from bridge.config import get_settings
#   settings = get_settings()
#   info(settings.bridge_config)  # "bridge v0.1.0"
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in the working directory (if exists)
# =============================================================================

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bridge.types import BridgeConfig


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Every value has a default, so the library works with no environment
    at all and reproduces DEFAULT_CONFIG.
    """

    # -------------------------------------------------------------------------
    # Bridge Identity
    # -------------------------------------------------------------------------

    BRIDGE_NAME: str = Field(
        default="bridge",
        description="Name reported by info()"
    )

    BRIDGE_VERSION: str = Field(
        default="0.1.0",
        description="Version reported by info()"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level used when DEBUG is off"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env values as unset
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def bridge_config(self) -> BridgeConfig:
        """Build the BridgeConfig record from BRIDGE_NAME and BRIDGE_VERSION."""
        return BridgeConfig(name=self.BRIDGE_NAME, version=self.BRIDGE_VERSION)

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.DEBUG else getattr(logging, self.LOG_LEVEL)

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once.
    Tests call get_settings.cache_clear() after changing the environment.
    """
    return Settings()


def setup_logging(settings: Settings | None = None) -> None:
    """Configure root logging for scripts and applications using the library."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
