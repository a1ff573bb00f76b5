"""
Centralized settings for naming-study.

All fields can be set via ``NAMING_STUDY_*`` environment variables (e.g.
``NAMING_STUDY_LOG_LEVEL=DEBUG``) or a ``.env`` file in the working
directory.

Tags:
    naming-study, configuration, settings, pydantic
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from naming_study.core.logging import LOG_LEVELS


class StudySettings(BaseSettings):
    """naming-study configuration."""

    model_config = SettingsConfigDict(
        env_prefix="NAMING_STUDY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="WARNING", description="Structlog log level")
    log_json: bool = Field(default=False, description="Render log events as JSON lines")
    service: str = Field(default="naming-study")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


_settings_cache: StudySettings | None = None


def get_settings(*, _force_reload: bool = False) -> StudySettings:
    """Load, validate, and cache a :class:`StudySettings` instance."""
    global _settings_cache
    if _settings_cache is None or _force_reload:
        _settings_cache = StudySettings()
    return _settings_cache


def clear_settings_cache() -> None:
    """Drop the cached settings (used by tests)."""
    global _settings_cache
    _settings_cache = None
