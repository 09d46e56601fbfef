"""Shared CLI option definitions so every command uses the same flags."""

from pathlib import Path

import typer

from ..config import DEFAULT_EXECUTABLE

DIRECTORY_OPTION = typer.Option(
    Path("."),
    "--directory",
    "-C",
    help="Project root containing the .beads directory",
    file_okay=False,
    resolve_path=True,
)

EXECUTABLE_OPTION = typer.Option(
    DEFAULT_EXECUTABLE, "--bd", help="bd executable name or path"
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log debug output to stderr"
)
