"""Configuration for the beads bridge."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

ENV_DISABLE_PRIME = "BEADS_DISABLE_PRIME"
ENV_DISABLE_COMPACT = "BEADS_DISABLE_COMPACT"
ENV_DISABLE_IDLE = "BEADS_DISABLE_IDLE"
ENV_SYNC_ON_IDLE = "BEADS_SYNC_ON_IDLE"

DEFAULT_EXECUTABLE = "bd"
DEFAULT_MARKER_DIR = ".beads"
DEFAULT_CONTEXT_HEADING = "## Beads Issue Tracker Context"


def _flag(environ: Mapping[str, str], name: str) -> bool:
    """Only the exact value "1" turns a flag on."""
    return environ.get(name) == "1"


class BridgeConfig(BaseModel):
    """Bridge settings, read once at startup.

    Handlers consult this object instead of inspecting the environment,
    so a single instance fixes the behavior for the lifetime of a plugin.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    disable_prime: bool = Field(
        default=False, description="Skip `bd prime` on session start"
    )
    disable_compact: bool = Field(
        default=False, description="Skip injecting context on compaction"
    )
    disable_idle: bool = Field(
        default=False, description="Skip all idle event handling"
    )
    sync_on_idle: bool = Field(
        default=False, description="Run `bd sync` when a session goes idle"
    )
    executable: str = Field(
        default=DEFAULT_EXECUTABLE, description="bd executable name or path"
    )
    marker_dir: str = Field(
        default=DEFAULT_MARKER_DIR,
        description="Project subdirectory whose presence activates the bridge",
    )
    context_heading: str = Field(
        default=DEFAULT_CONTEXT_HEADING,
        description="Heading placed above injected bd output",
    )

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: object
    ) -> "BridgeConfig":
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            **overrides: Field values that take precedence over the environment

        Returns:
            BridgeConfig with flags set from BEADS_* variables
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {
            "disable_prime": _flag(env, ENV_DISABLE_PRIME),
            "disable_compact": _flag(env, ENV_DISABLE_COMPACT),
            "disable_idle": _flag(env, ENV_DISABLE_IDLE),
            "sync_on_idle": _flag(env, ENV_SYNC_ON_IDLE),
        }
        values.update(overrides)
        return cls.model_validate(values)

    def format_context(self, text: str) -> str:
        """Prefix bd output with the context heading."""
        return f"{self.context_heading}\n\n{text}"
