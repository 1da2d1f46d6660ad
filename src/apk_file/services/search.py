"""
Contents search service.

Sends the query to the Alpine package contents endpoint and scrapes the
results table into ``FileRecord`` objects.
"""

from __future__ import annotations

import requests
from lxml import etree, html

from ..core.config import SearchConfig, Settings, settings
from ..core.exceptions import DocumentParseError, SearchRequestError
from ..core.logging import LoggerMixin, get_logger
from ..domain.models import COLUMNS, FileRecord, SearchQuery
from .query import build_query

logger = get_logger(__name__)

# Results tables, in document order
RESULT_TABLES_XPATH = (
    "//table[contains(concat(' ', normalize-space(@class), ' '), ' pure-table ')]"
)


def build_search_url(query: SearchQuery, base_url: str | None = None) -> str:
    """Return the full search URL for ``query``."""
    return f"{base_url or settings.search_url}?{query.encode()}"


def parse_document(body: bytes | str) -> html.HtmlElement:
    """
    Parse an HTML response body.

    Raises:
        DocumentParseError: If the body is empty or cannot be parsed
    """
    try:
        return html.document_fromstring(body)
    except (etree.ParserError, etree.XMLSyntaxError, ValueError) as e:
        raise DocumentParseError(f"creating document failed: {e}", error=str(e)) from e


def fetch_document(
    url: str,
    *,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> html.HtmlElement:
    """
    GET ``url`` and parse the response as HTML.

    The response is closed before returning, including on failure.

    Raises:
        SearchRequestError: On connection failure or a non-2xx status
        DocumentParseError: If the body is not usable HTML
    """
    client = session or requests
    try:
        with client.get(url, timeout=timeout) as response:
            response.raise_for_status()
            body = response.content
    except requests.RequestException as e:
        raise SearchRequestError(f"requesting {url} failed: {e}", url=url, error=str(e)) from e
    return parse_document(body)


def _data_rows(table: html.HtmlElement) -> list[html.HtmlElement]:
    rows = table.xpath(".//tr")
    if table.xpath(".//thead"):
        rows = [row for row in rows if not row.xpath("ancestor::thead")]
    else:
        # Without <thead> the leading row is the header, whatever its cells
        rows = rows[1:]
    return [row for row in rows if row.xpath("./td")]


def extract_records(document: html.HtmlElement) -> list[FileRecord]:
    """
    Read every data row of the results table into a ``FileRecord``.

    Cells are mapped by position through ``COLUMNS``. Cells beyond the known
    columns are logged and ignored; missing cells leave their field empty.

    Args:
        document: Parsed search response

    Returns:
        Records in table order; empty when the table has no data rows
    """
    records: list[FileRecord] = []
    rows = [row for table in document.xpath(RESULT_TABLES_XPATH) for row in _data_rows(table)]
    for row in rows:
        fields: dict[str, str] = {}
        for index, cell in enumerate(row.xpath("./td")):
            # Surrounding whitespace from the page markup is not part of the value
            text = cell.text_content().strip()
            field = COLUMNS.get(index)
            if field is None:
                logger.warning("unmapped_column", column=index, value=text)
                continue
            fields[field] = text
        if len(fields) < len(COLUMNS):
            logger.debug("short_row", cells=len(fields), expected=len(COLUMNS))
        records.append(FileRecord(**fields))
    return records


class SearchService(LoggerMixin):
    """
    Runs one contents search.

    Args:
        config: Filters and flags for this invocation
        session: Optional ``requests`` session to send the request with
        app_settings: Settings to use instead of the module defaults
    """

    def __init__(
        self,
        config: SearchConfig,
        *,
        session: requests.Session | None = None,
        app_settings: Settings | None = None,
    ) -> None:
        self.config = config
        self.session = session
        self.settings = app_settings or settings

    def search(self, arg: str) -> list[FileRecord]:
        """
        Find the packages containing files that match ``arg``.

        Raises:
            SearchRequestError: If the search endpoint cannot be reached
            DocumentParseError: If the response cannot be parsed
        """
        query = build_query(arg, self.config)
        url = build_search_url(query, self.settings.search_url)
        self.logger.debug("requesting", url=url)

        document = fetch_document(
            url,
            session=self.session,
            timeout=self.settings.request_timeout_seconds,
        )
        records = extract_records(document)

        self.logger.debug("search_completed", url=url, count=len(records))
        return records


def search_contents(arg: str, config: SearchConfig | None = None) -> list[FileRecord]:
    """
    Convenience function for a one-off search.

    Example:
        >>> records = search_contents("/usr/bin/bash", SearchConfig(arch="x86_64"))
    """
    return SearchService(config or SearchConfig()).search(arg)
