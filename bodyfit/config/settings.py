"""
Centralized settings management using pydantic-settings.

All values can be set from environment variables with the BODYFIT_ prefix
(e.g. BODYFIT_STORE_BACKEND=memory) or from a .env file.
Use get_settings() to access the singleton settings instance.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Optional environment variables:
        - BODYFIT_DEBUG: Force DEBUG log level (default: false)
        - BODYFIT_LOG_LEVEL: Minimum log level (default: INFO)
        - BODYFIT_JSON_LOGS: Emit JSON logs (default: false)
        - BODYFIT_STORE_BACKEND: "file" or "memory" (default: file)
        - BODYFIT_STORE_PATH: JSON cache file (default: ~/.bodyfit/store.json)
        - BODYFIT_ANALYSIS_DELAY_SEC: Presentation pacing for async sessions
    """

    model_config = SettingsConfigDict(
        env_prefix="BODYFIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    debug: bool = Field(default=False, description="Debug mode (forces DEBUG logs)")
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="JSON log output")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    # ==========================================================================
    # Measurement Store
    # ==========================================================================
    store_backend: Literal["file", "memory"] = Field(
        default="file", description="Measurement store backend"
    )
    store_path: Path = Field(
        default=Path.home() / ".bodyfit" / "store.json",
        description="JSON file used by the file store",
    )

    @field_validator("store_path", mode="after")
    @classmethod
    def expand_store_path(cls, v: Path) -> Path:
        return v.expanduser()

    # ==========================================================================
    # Analysis
    # ==========================================================================
    analysis_delay_sec: float = Field(
        default=0.0,
        ge=0.0,
        description="Artificial delay before async analysis (UI pacing only)",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure only one instance is created.

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache to allow different settings in tests.
    """
    test_defaults = {
        "store_backend": "memory",
    }
    test_defaults.update(overrides)
    return Settings(**test_defaults)
