"""
Command-line interface using Typer.

Usage:
    apk-file [-arch ARCH] [-repo REPO] [-d] PATH
    apk-file -v
"""

from __future__ import annotations

import sys
from typing import Annotated, NoReturn, Optional

import typer
from rich.markup import escape

from ..core.config import VALID_ARCHES, VALID_REPOS, SearchConfig, settings
from ..core.exceptions import ApkFileError, InvalidArgumentError
from ..core.logging import configure_logging, console, get_logger
from ..services.render import render_table
from ..services.search import SearchService

app = typer.Typer(
    name=settings.app_name,
    help=settings.app_description,
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"{settings.app_name} version {settings.app_version}")
        raise typer.Exit()


def fail(error: ApkFileError) -> NoReturn:
    """Report a fatal error on stderr and exit non-zero."""
    console.print(f"[red]{escape(error.message)}[/red]", soft_wrap=True)
    logger.debug("search_failed", message=error.message, **error.context)
    raise typer.Exit(1)


@app.command()
def search(
    path: Annotated[
        Optional[str],
        typer.Argument(
            metavar="PATH",
            help="File name or path to search for, e.g. 'bash' or '/usr/bin/bash'",
            show_default=False,
        ),
    ] = None,
    arch: Annotated[
        str,
        typer.Option(
            "--arch",
            "-arch",
            help=f"arch to search for ({', '.join(VALID_ARCHES)})",
            show_default=False,
        ),
    ] = "",
    repo: Annotated[
        str,
        typer.Option(
            "--repo",
            "-repo",
            help=f"repository to search in ({', '.join(VALID_REPOS)})",
            show_default=False,
        ),
    ] = "",
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-debug",
            "-d",
            help="enable debug logging",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-version",
            "-v",
            help="print version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """
    Search apk package contents via the command line.

    Prints every file matching PATH together with the package, branch,
    repository and architecture that provide it.
    """
    try:
        config = SearchConfig(arch=arch, repo=repo, debug=debug)
        if path is None:
            raise InvalidArgumentError("must pass a file to search for")
    except ApkFileError as e:
        fail(e)

    if config.debug:
        configure_logging("DEBUG")

    try:
        records = SearchService(config).search(path)
    except ApkFileError as e:
        fail(e)

    render_table(records)


def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"\n[red]Fatal error:[/red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
