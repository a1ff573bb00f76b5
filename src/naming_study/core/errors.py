"""
Structured error types for naming-study.

The demonstration routines themselves never fail. Errors only arise at the
edges: looking up an example number that does not exist, or loading a
configuration value that cannot be used.

Manifesto:
    - **Typed Error Hierarchy:** One subclass per kind of failure
    - **Rich Context:** Errors carry the values needed to report them
    - **Error Chaining:** Preserve original exceptions via ``cause=``

Architecture:
    ::

        ┌──────────────────────────────────────────┐
        │                StudyError                │
        │     (category, context, cause)           │
        ├──────────────────────────────────────────┤
        │  ExampleNotFoundError    ConfigError     │
        │  (LOOKUP)                (CONFIG)        │
        └──────────────────────────────────────────┘

Usage:
    from naming_study.core.errors import ExampleNotFoundError

    try:
        get_example(42)
    except ExampleNotFoundError as e:
        print(e.to_dict())

Tags:
    error-handling, exception-hierarchy, error-context, naming-study
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for reporting."""

    CONFIG = "CONFIG"
    LOOKUP = "LOOKUP"
    INTERNAL = "INTERNAL"


class StudyError(Exception):
    """
    Base class for all naming-study errors.

    Examples:
        >>> err = StudyError("boom", context={"where": "cli"})
        >>> err.category.value
        'INTERNAL'
        >>> err.to_dict()["context"]
        {'where': 'cli'}
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and JSON output."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
            "context": self.context,
        }
        if self.cause is not None:
            result["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, category={self.category.value})"


class ExampleNotFoundError(StudyError):
    """No demonstration routine is registered under the requested number."""

    default_category = ErrorCategory.LOOKUP

    def __init__(self, number: int, available: list[int] | None = None) -> None:
        available = list(available or [])
        super().__init__(
            f"Example {number} not found (available: {', '.join(map(str, available))})",
            context={"number": number, "available": available},
        )
        self.number = number
        self.available = available


class ConfigError(StudyError):
    """A configuration value is missing or unusable."""

    default_category = ErrorCategory.CONFIG
