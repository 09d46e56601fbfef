"""Event bridge between host session lifecycle events and bd.

What this does:
    1. On ``session.created``: runs ``bd prime`` and injects the output into
       the session as a context-only prompt
    2. On compaction: appends ``bd prime`` output to the compaction context
       so it survives
    3. On ``session.idle``: optionally runs ``bd sync``

The bridge only activates for projects that have run ``bd init`` (a
``.beads/`` directory exists). Any bd failure means "nothing to inject"
and never reaches the host.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from typing import Any, Protocol

from .config import BridgeConfig
from .models import BridgeEvent, EventType, PromptRequest
from .runner import BdRunner

logger = logging.getLogger(__name__)

HOOK_EVENT = "event"
HOOK_COMPACTING = "experimental.session.compacting"

HANDLED_EVENTS = {event_type.value for event_type in EventType}

Hook = Callable[..., Awaitable[None]]


class SessionAPI(Protocol):
    async def prompt(self, *, path: dict[str, Any], body: dict[str, Any]) -> Any: ...


class HostClient(Protocol):
    """The slice of the host SDK client the bridge uses."""

    session: SessionAPI


class EventBridge:
    """Handles host lifecycle events by shelling out to bd."""

    def __init__(
        self,
        directory: Path | str,
        client: HostClient | None = None,
        config: BridgeConfig | None = None,
        runner: BdRunner | None = None,
    ) -> None:
        """Initialize the bridge.

        Args:
            directory: Project root
            client: Host SDK client used for session prompts
            config: Bridge settings; read from the environment if None
            runner: bd runner; one running in ``directory`` is created if None
        """
        self.directory = Path(directory)
        self.client = client
        self.config = config or BridgeConfig.from_env()
        self.runner = runner or BdRunner(self.config.executable, cwd=self.directory)

    @property
    def marker_path(self) -> Path:
        return self.directory / self.config.marker_dir

    @property
    def active(self) -> bool:
        """True when the project uses beads."""
        return self.marker_path.is_dir()

    def hooks(self) -> dict[str, Hook]:
        """Hooks to register with the host; empty when the project has no marker."""
        if not self.active:
            logger.debug(f"No {self.marker_path}, beads bridge inactive")
            return {}
        return {
            HOOK_EVENT: self.on_event,
            HOOK_COMPACTING: self.on_compacting,
        }

    async def prime_context(self) -> str | None:
        """Run ``bd prime`` and return its output under the context heading."""
        prime = await self.runner.output("prime")
        if prime is None:
            return None
        return self.config.format_context(prime)

    async def on_event(self, event: BridgeEvent | Mapping[str, Any]) -> None:
        """Dispatch a host event to its handler; other event types are ignored."""
        if not isinstance(event, BridgeEvent):
            if event.get("type") not in HANDLED_EVENTS:
                return
            event = BridgeEvent.model_validate(event)

        if event.type == EventType.SESSION_CREATED.value:
            await self.on_session_created(event)
        elif event.type == EventType.SESSION_IDLE.value:
            await self.on_session_idle(event)

    async def on_session_created(self, event: BridgeEvent) -> None:
        """Load beads context into a new session."""
        if self.config.disable_prime:
            return

        context = await self.prime_context()
        if context is None:
            return

        session_id = event.session_id
        if session_id is None or self.client is None:
            logger.debug("No session to address, discarding bd prime output")
            return

        request = PromptRequest.context_only(session_id, context)
        await self.client.session.prompt(**request.model_dump(by_alias=True))
        logger.debug(f"Injected beads context into session {session_id}")

    async def on_session_idle(self, event: BridgeEvent) -> None:
        """Optionally sync the tracker when a session goes idle."""
        if self.config.disable_idle or not self.config.sync_on_idle:
            return

        result = await self.runner.run("sync")
        if result.ok:
            logger.debug("bd sync completed")

    async def on_compacting(self, input: Any, output: Any) -> None:
        """Add beads context to the compaction output so it is kept."""
        if self.config.disable_compact:
            return

        context = await self.prime_context()
        if context is None:
            return

        if isinstance(output, Mapping):
            output["context"].append(context)
        else:
            output.context.append(context)


def create_plugin(
    directory: Path | str,
    client: HostClient | None = None,
    config: BridgeConfig | None = None,
    runner: BdRunner | None = None,
) -> dict[str, Hook]:
    """Plugin entry point: return the hooks to register for ``directory``.

    Returns an empty mapping when ``directory`` has no ``.beads`` marker.
    """
    return EventBridge(directory, client=client, config=config, runner=runner).hooks()
