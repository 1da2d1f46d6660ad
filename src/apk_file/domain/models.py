"""
Domain models using Pydantic V2.

Defines the result record scraped from the contents table, the declarative
column layout of that table, and the query sent to the search endpoint.
"""

from __future__ import annotations

from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

HEADERS: tuple[str, ...] = ("FILE", "PACKAGE", "BRANCH", "REPOSITORY", "ARCHITECTURE")


class FileRecord(BaseModel):
    """
    One row of the contents search results.

    Attributes:
        path: Path of the file inside the package
        package: Name of the package providing the file
        branch: Distribution branch (e.g. ``edge``, ``v3.20``)
        repository: Repository name (``main``, ``community``, ``testing``)
        architecture: Target architecture
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(default="", description="File path")
    package: str = Field(default="", description="Owning package name")
    branch: str = Field(default="", description="Distribution branch")
    repository: str = Field(default="", description="Repository name")
    architecture: str = Field(default="", description="Target architecture")

    def as_row(self) -> tuple[str, str, str, str, str]:
        """Return the field values in table column order."""
        return (self.path, self.package, self.branch, self.repository, self.architecture)


# Column index in the results table -> FileRecord field
COLUMNS: dict[int, str] = {
    0: "path",
    1: "package",
    2: "branch",
    3: "repository",
    4: "architecture",
}


class SearchQuery(BaseModel):
    """Query parameters understood by the contents search endpoint."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(default="", description="Filename glob")
    path: str = Field(default="", description="Directory glob")
    branch: str = Field(default="", description="Branch filter, always empty")
    repo: str = Field(default="", description="Repository filter")
    arch: str = Field(default="", description="Architecture filter")

    def to_params(self) -> dict[str, str]:
        """Return the parameters sorted by key."""
        return dict(sorted(self.model_dump().items()))

    def encode(self) -> str:
        """URL-encode the parameters."""
        return urlencode(self.to_params())
