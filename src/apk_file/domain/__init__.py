"""Domain models and business entities."""

from __future__ import annotations

from .models import COLUMNS, HEADERS, FileRecord, SearchQuery

__all__ = ["COLUMNS", "HEADERS", "FileRecord", "SearchQuery"]
