"""
Pytest configuration and fixtures.

Provides canned search responses so no test touches the network.
"""

from __future__ import annotations

from typing import Callable
from unittest.mock import MagicMock

import pytest
import requests

from apk_file.core.config import SearchConfig
from apk_file.domain.models import FileRecord

CONTENTS_PAGE = """<!DOCTYPE html>
<html>
<head><title>Alpine Linux packages</title></head>
<body>
<div class="table-responsive">
<table class="pure-table pure-table-bordered">
<thead>
<tr><th>File</th><th>Package</th><th>Branch</th><th>Repository</th><th>Architecture</th></tr>
</thead>
<tbody>
{rows}
</tbody>
</table>
</div>
</body>
</html>
"""


def contents_page(*rows: tuple[str, ...]) -> str:
    """Build a contents search page with one ``<tr>`` per row."""
    body = "\n".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows
    )
    return CONTENTS_PAGE.format(rows=body)


def make_response(body: str | bytes, status_code: int = 200, url: str = "") -> requests.Response:
    """Build a ``requests.Response`` without a connection behind it."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.url = url
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response._content_consumed = True
    return response


@pytest.fixture
def php_posix_row() -> tuple[str, ...]:
    """A single well-formed result row."""
    return ("/usr/lib/php7/modules/posix.so", "php7-posix", "edge", "testing", "armhf")


@pytest.fixture
def php_posix_record() -> FileRecord:
    return FileRecord(
        path="/usr/lib/php7/modules/posix.so",
        package="php7-posix",
        branch="edge",
        repository="testing",
        architecture="armhf",
    )


@pytest.fixture
def page() -> Callable[..., str]:
    """Builder for contents search pages."""
    return contents_page


@pytest.fixture
def default_config() -> SearchConfig:
    return SearchConfig()


@pytest.fixture
def session_factory() -> Callable[..., MagicMock]:
    """Return a factory for sessions whose ``get`` yields a canned response."""

    def factory(body: str | bytes = "", status_code: int = 200, error: Exception | None = None) -> MagicMock:
        session = MagicMock(spec=requests.Session)
        if error is not None:
            session.get.side_effect = error
        else:
            session.get.side_effect = lambda url, **kwargs: make_response(body, status_code, url)
        return session

    return factory
