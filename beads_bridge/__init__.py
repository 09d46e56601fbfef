"""Bridge between the beads (bd) issue tracker CLI and host session events."""

from .bridge import HOOK_COMPACTING, HOOK_EVENT, EventBridge, create_plugin
from .config import BridgeConfig
from .models import BridgeEvent, CommandResult, CommandStatus, CompactionOutput
from .runner import BdRunner

__version__ = "0.1.0"

__all__ = [
    "BdRunner",
    "BridgeConfig",
    "BridgeEvent",
    "CommandResult",
    "CommandStatus",
    "CompactionOutput",
    "EventBridge",
    "HOOK_COMPACTING",
    "HOOK_EVENT",
    "create_plugin",
]
