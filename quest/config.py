"""
Configuration settings for lesson-quest.

Uses Pydantic Settings for environment variable management with .env file support.
Every field can be overridden with a ``QUEST_`` prefixed environment variable,
e.g. ``QUEST_PROGRESS_FILE=/tmp/progress.json``.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="QUEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    progress_file: Path = Field(
        default=Path.home() / ".quest" / "progress.json",
        description="JSON file holding per-level progress records",
    )

    # ========================================
    # Curriculum
    # ========================================
    course_file: Path | None = Field(
        default=None,
        description="Curriculum JSON document (bundled sample course when unset)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Loguru level for the stderr sink",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
