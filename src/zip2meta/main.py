"""Main CLI entry point for zip2meta."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.traceback import Traceback

from .exceptions import ArchiveError
from .logging_config import setup_logging
from .pipeline import run
from .settings import get_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="zip2meta",
    help="Print the metadata of every entry in a zip archive as JSON lines.",
    add_completion=False,
    rich_markup_mode="markdown",
)


@app.command()
def describe(
    archive: Annotated[
        Path | None,
        typer.Argument(
            help="Path to the zip archive. Defaults to ZIP2META_ARCHIVE_PATH.",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", "-l", help="Logging level, e.g. DEBUG or INFO."),
    ] = None,
    show_traceback: Annotated[
        bool,
        typer.Option("--traceback", help="Print a full traceback on failure."),
    ] = False,
):
    """Describe the entries of a zip archive without extracting them."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)
    archive_path = archive or settings.archive_path

    try:
        run(archive_path)
    except (OSError, ArchiveError) as e:
        logger.error("Failed to describe %s: %s", archive_path, e)
        console = Console(stderr=True)
        if show_traceback:
            console.print(Traceback())
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1) from e


def run_cli_directly():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    run_cli_directly()
