"""Search, query building and output services."""

from __future__ import annotations

from .query import build_query, get_file_and_path
from .render import format_table, render_table
from .search import SearchService, extract_records, search_contents

__all__ = [
    "SearchService",
    "build_query",
    "extract_records",
    "format_table",
    "get_file_and_path",
    "render_table",
    "search_contents",
]
