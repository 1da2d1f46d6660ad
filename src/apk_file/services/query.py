"""
Turn a path argument into the filename and directory globs the contents
search expects.

``bash`` searches for ``*bash*`` anywhere; ``/usr/bin/bash`` searches for
``bash*`` inside directories matching ``*/usr/bin``.
"""

from __future__ import annotations

import posixpath

from ..core.config import SearchConfig
from ..domain.models import SearchQuery


def _clean(path: str) -> str:
    if not path:
        return "."
    cleaned = posixpath.normpath(path)
    # normpath keeps a leading "//"; collapse it like any other run of slashes
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _dir(path: str) -> str:
    return _clean(path[: path.rfind("/") + 1])


def get_file_and_path(arg: str) -> tuple[str, str]:
    """
    Split a path argument into ``(file_pattern, dir_pattern)``.

    Args:
        arg: File name or path, e.g. ``posix`` or ``/usr/bin/bash``

    Returns:
        The filename glob and the directory glob (empty without a directory)
    """
    file_pattern = f"*{_base(arg)}*"
    dir_pattern = _dir(arg)
    if dir_pattern and dir_pattern != ".":
        dir_pattern = f"*{dir_pattern}"
        file_pattern = file_pattern[1:]
    else:
        dir_pattern = ""
    return file_pattern, dir_pattern


def build_query(arg: str, config: SearchConfig) -> SearchQuery:
    """Build the search parameters for ``arg`` under ``config``'s filters."""
    file_pattern, dir_pattern = get_file_and_path(arg)
    return SearchQuery(
        file=file_pattern,
        path=dir_pattern,
        branch="",
        repo=config.repo,
        arch=config.arch,
    )
