"""Core application components."""

from __future__ import annotations

from .config import SearchConfig, settings
from .exceptions import ApkFileError
from .logging import get_logger

__all__ = ["settings", "SearchConfig", "ApkFileError", "get_logger"]
