"""Shared plumbing: errors, logging and settings."""

from naming_study.core.errors import (
    ConfigError,
    ErrorCategory,
    ExampleNotFoundError,
    StudyError,
)
from naming_study.core.logging import configure_logging, get_logger

__all__ = [
    "ConfigError",
    "ErrorCategory",
    "ExampleNotFoundError",
    "StudyError",
    "configure_logging",
    "get_logger",
]
