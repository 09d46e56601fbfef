"""Helpers shared by CLI commands."""

import logging
import sys
from pathlib import Path

from ..bridge import EventBridge
from ..config import BridgeConfig


def setup_logging(verbose: bool) -> None:
    """Send debug logs to stderr; stdout stays reserved for hook output."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def build_bridge(directory: Path, executable: str) -> EventBridge:
    """Create a bridge for ``directory`` with flags from the environment."""
    config = BridgeConfig.from_env(executable=executable)
    return EventBridge(directory, config=config)
