"""Main CLI entry point."""

import typer
from rich.console import Console

from .check import check
from .hook import hook

app = typer.Typer(
    name="beads-bridge",
    help="Bridge beads (bd) issue tracker context into agent sessions",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="hook", context_settings={"help_option_names": ["-h", "--help"]})(
    hook
)
app.command(name="check", context_settings={"help_option_names": ["-h", "--help"]})(
    check
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from beads_bridge import __version__

    console.print(f"Beads Bridge v{__version__}")


if __name__ == "__main__":
    app()
