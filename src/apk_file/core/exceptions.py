"""
Exception hierarchy for apk-file.

Every fatal condition of a search is one of these; malformed table rows are
logged rather than raised.
"""

from __future__ import annotations

from typing import Any


class ApkFileError(Exception):
    """Base exception for all apk-file errors."""

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message
            **context: Additional error context for logging
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidArgumentError(ApkFileError):
    """Raised when a command-line value is missing or not allowed."""


class SearchRequestError(ApkFileError):
    """Raised when the contents search cannot be fetched."""


class DocumentParseError(ApkFileError):
    """Raised when the search response is not a usable HTML document."""
