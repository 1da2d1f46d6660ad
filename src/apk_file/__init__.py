"""
apk-file - search Alpine Linux package contents from the command line.

Finds which packages provide a given file by querying the contents search
on pkgs.alpinelinux.org and printing the matches as a table.
"""

from __future__ import annotations

__version__ = "0.3.0"

from .core.config import SearchConfig, settings
from .domain.models import FileRecord, SearchQuery
from .services.search import SearchService, search_contents

__all__ = [
    "__version__",
    "settings",
    "search_contents",
    "FileRecord",
    "SearchConfig",
    "SearchQuery",
    "SearchService",
]
