"""Shell hook commands.

Hosts that integrate through shell hooks inject whatever the hook prints
on stdout, so these commands print the beads context block and nothing
else. They exit 0 even when bd is missing or fails.
"""

import asyncio
from enum import Enum
from pathlib import Path

import typer

from ..bridge import EventBridge
from ..models import BridgeEvent, CompactionOutput, EventType
from .options import DIRECTORY_OPTION, EXECUTABLE_OPTION, VERBOSE_OPTION
from .utils import build_bridge, setup_logging


class HookName(str, Enum):
    SESSION_START = "session-start"
    PRE_COMPACT = "pre-compact"
    IDLE = "idle"


async def _run_hook(bridge: EventBridge, name: HookName) -> list[str]:
    """Run one hook and return the context blocks to print."""
    if name == HookName.SESSION_START:
        if bridge.config.disable_prime:
            return []
        context = await bridge.prime_context()
        return [context] if context else []

    if name == HookName.PRE_COMPACT:
        output = CompactionOutput()
        await bridge.on_compacting(None, output)
        return output.context

    await bridge.on_session_idle(BridgeEvent(type=EventType.SESSION_IDLE.value))
    return []


def hook(
    name: HookName = typer.Argument(..., help="Hook to run"),
    directory: Path = DIRECTORY_OPTION,
    executable: str = EXECUTABLE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Run a session hook and print any beads context to stdout.

    Examples:
        # SessionStart hook
        beads-bridge hook session-start

        # PreCompact hook for a project elsewhere
        beads-bridge hook pre-compact -C ~/src/myproject
    """
    setup_logging(verbose)
    bridge = build_bridge(directory, executable)
    if not bridge.active:
        return

    for block in asyncio.run(_run_hook(bridge, name)):
        typer.echo(block)
