"""
Core configuration management using Pydantic V2 models.

This module provides two immutable configuration layers:
- ``Settings``: application-wide constants (endpoint, logging, version)
- ``SearchConfig``: per-invocation options built once from CLI arguments

Neither layer reads environment variables or configuration files; every
value comes from code defaults or from the command line.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .. import __version__
from .exceptions import InvalidArgumentError

VALID_ARCHES: tuple[str, ...] = (
    "x86",
    "x86_64",
    "armhf",
    "armv7",
    "aarch64",
    "ppc64le",
    "s390x",
    "mips64",
)

VALID_REPOS: tuple[str, ...] = ("main", "community", "testing")


class Settings(BaseModel):
    """
    Application-wide configuration.

    Frozen after construction; tests build their own instances instead of
    mutating the shared one.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # ═══════════════════════════════════════════════════════════════════════
    # Application Configuration
    # ═══════════════════════════════════════════════════════════════════════
    app_name: str = Field(
        default="apk-file",
        description="Program name shown in help and version output",
    )

    app_description: str = Field(
        default="Search apk package contents via the command line",
        description="One-line program description",
    )

    app_version: str = Field(
        default=__version__,
        description="Application version",
    )

    # ═══════════════════════════════════════════════════════════════════════
    # Remote Search Configuration
    # ═══════════════════════════════════════════════════════════════════════
    search_url: str = Field(
        default="https://pkgs.alpinelinux.org/contents",
        description="Alpine package contents search endpoint",
    )

    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="HTTP request timeout in seconds (None keeps the client default)",
    )

    # ═══════════════════════════════════════════════════════════════════════
    # Logging Configuration
    # ═══════════════════════════════════════════════════════════════════════
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase."""
        return v.upper() if isinstance(v, str) else v


class SearchConfig(BaseModel):
    """
    Options for a single search, constructed once from parsed arguments.

    Attributes:
        arch: Architecture filter, empty for all architectures
        repo: Repository filter, empty for all repositories
        debug: Whether verbose logging was requested
    """

    model_config = ConfigDict(frozen=True)

    arch: str = Field(default="", description="Architecture filter")
    repo: str = Field(default="", description="Repository filter")
    debug: bool = Field(default=False, description="Enable debug logging")

    @field_validator("arch", mode="before")
    @classmethod
    def validate_arch(cls, v: str | None) -> str:
        v = v or ""
        if v and v not in VALID_ARCHES:
            raise InvalidArgumentError(f"{v} is not a valid arch", valid=", ".join(VALID_ARCHES))
        return v

    @field_validator("repo", mode="before")
    @classmethod
    def validate_repo(cls, v: str | None) -> str:
        v = v or ""
        if v and v not in VALID_REPOS:
            raise InvalidArgumentError(f"{v} is not a valid repo", valid=", ".join(VALID_REPOS))
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Returns:
        Settings: Singleton settings object
    """
    return Settings()


# Convenience export
settings: Settings = get_settings()
