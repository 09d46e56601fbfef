"""Diagnostics for a project's beads setup."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .options import DIRECTORY_OPTION, EXECUTABLE_OPTION, VERBOSE_OPTION
from .utils import build_bridge, setup_logging

console = Console()


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def check(
    directory: Path = DIRECTORY_OPTION,
    executable: str = EXECUTABLE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Check that the bridge would activate and bd can be found."""
    setup_logging(verbose)
    bridge = build_bridge(directory, executable)
    config = bridge.config
    bd_path = bridge.runner.which()

    table = Table(title="Beads Bridge")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Project", str(bridge.directory))
    table.add_row(
        "Marker directory",
        f"✅ {bridge.marker_path}" if bridge.active else f"❌ {bridge.marker_path}",
    )
    table.add_row(
        "bd executable", f"✅ {bd_path}" if bd_path else f"❌ {executable} not on PATH"
    )
    table.add_row("Prime on session start", _yes_no(not config.disable_prime))
    table.add_row("Inject on compaction", _yes_no(not config.disable_compact))
    table.add_row("Handle idle", _yes_no(not config.disable_idle))
    table.add_row("Sync on idle", _yes_no(config.sync_on_idle))
    console.print(table)

    if not bridge.active:
        console.print(
            f"❌ [red]No {config.marker_dir} directory found. "
            f"Run 'bd init' in the project first.[/red]"
        )
        raise typer.Exit(1)

    if not bd_path:
        console.print(f"❌ [red]{executable} not found on PATH[/red]")
        raise typer.Exit(1)

    console.print("✅ [green]Beads bridge is ready[/green]")
