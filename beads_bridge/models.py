"""Pydantic models for host events, prompts and bd command results.

Host payloads arrive as plain mappings. They are validated into these
models at the edge so handlers work with typed attributes; unknown keys
are kept rather than rejected since the host may add fields at any time.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    """Host event notifications the bridge reacts to.

    Compaction is not an event; it arrives through its own hook.
    """

    SESSION_CREATED = "session.created"
    SESSION_IDLE = "session.idle"


class BridgeEvent(BaseModel):
    """A tagged notification emitted by the host.

    ``properties`` is kept as the host sent it: its shape differs per event
    type and the bridge only ever looks up ``properties.info.id``.
    """

    model_config = ConfigDict(extra="allow")

    type: str = Field(..., description="Event type, e.g. 'session.created'")
    properties: Any = Field(None, description="Event-specific properties")

    @property
    def session_id(self) -> str | None:
        """Session id used to address a session-scoped prompt, if present."""
        if not isinstance(self.properties, Mapping):
            return None
        info = self.properties.get("info")
        if not isinstance(info, Mapping):
            return None
        session_id = info.get("id")
        if isinstance(session_id, str) and session_id:
            return session_id
        return None


class TextPart(BaseModel):
    type: Literal["text"] = "text"
    text: str


class SessionPath(BaseModel):
    id: str


class PromptBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    no_reply: bool = Field(
        default=True,
        alias="noReply",
        description="Add to the session context without triggering a reply",
    )
    parts: list[TextPart] = Field(default_factory=list)


class PromptRequest(BaseModel):
    """Arguments for the host's ``session.prompt`` call."""

    path: SessionPath
    body: PromptBody

    @classmethod
    def context_only(cls, session_id: str, text: str) -> "PromptRequest":
        """Build a prompt that injects ``text`` without asking for a reply."""
        return cls(
            path=SessionPath(id=session_id),
            body=PromptBody(no_reply=True, parts=[TextPart(text=text)]),
        )


class CompactionOutput(BaseModel):
    """Output object handed to the compaction hook.

    Hosts may pass their own object instead; the bridge only needs an
    appendable ``context`` list.
    """

    context: list[str] = Field(default_factory=list)


class CommandStatus(str, Enum):
    """Outcome of a single bd invocation."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"  # executable not on PATH
    FAILED = "failed"  # ran, exited non-zero
    ERROR = "error"  # any other OS error


class CommandResult(BaseModel):
    """Result of running bd with a list of arguments."""

    args: list[str] = Field(..., description="Arguments passed after the executable")
    status: CommandStatus
    stdout: str = Field("", description="Trimmed standard output")
    returncode: int | None = Field(None, description="Exit status, if the tool ran")
    reason: str | None = Field(None, description="Failure detail for non-success")

    @property
    def ok(self) -> bool:
        return self.status == CommandStatus.SUCCESS

    @property
    def output(self) -> str | None:
        """Text to inject, or None when there is nothing usable.

        Tool absence, tool errors and empty output all collapse to None.
        """
        if self.ok and self.stdout:
            return self.stdout
        return None
