"""Configuration management for grid-arbiter.

Loads grid defaults from environment variables or a .env file.
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from grid_arbiter.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GridArbiterSettings(BaseSettings):
    """Application settings loaded from environment variables and .env files.

    Priority (highest to lowest):
      1. Explicit constructor arguments
      2. Environment variables (GRID_ARBITER_COLS, GRID_ARBITER_LOG_LEVEL, etc.)
      3. .env file in current directory
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Grid shape
    grid_arbiter_cols: Annotated[int, Field(description="Number of grid columns")] = 12

    # Interaction defaults
    grid_arbiter_vertical_compact: Annotated[
        bool, Field(description="Pull items up to remove vertical gaps")
    ] = True
    grid_arbiter_prevent_collision: Annotated[
        bool, Field(description="Reject moves and resizes that would overlap another item")
    ] = False
    grid_arbiter_is_draggable: Annotated[
        bool, Field(description="Layout-wide default for items without isDraggable")
    ] = True
    grid_arbiter_is_resizable: Annotated[
        bool, Field(description="Layout-wide default for items without isResizable")
    ] = True

    # Logging
    grid_arbiter_log_level: Annotated[str, Field(description="Root log level")] = "WARNING"

    @field_validator("grid_arbiter_cols")
    @classmethod
    def validate_cols(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"grid_arbiter_cols must be >= 1, got {v}")
        return v

    @field_validator("grid_arbiter_log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"grid_arbiter_log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return v

    @property
    def log_level(self) -> int:
        return getattr(logging, self.grid_arbiter_log_level)

    def require_cols(self, cols: int | None = None) -> int:
        """Return ``cols`` or the configured default, raising if it is unusable."""
        if cols is None:
            return self.grid_arbiter_cols
        if cols < 1:
            raise ConfigurationError(f"Column count must be at least 1, got {cols}.")
        return cols


# Singleton-ish: lazily loaded on first access
_settings: GridArbiterSettings | None = None


def get_settings(**overrides: object) -> GridArbiterSettings:
    """Get or create the application settings singleton."""
    global _settings
    if _settings is None or overrides:
        _settings = GridArbiterSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Reset cached settings (useful for testing)."""
    global _settings
    _settings = None
