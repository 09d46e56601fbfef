"""Test configuration and fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from beads_bridge.models import CommandResult, CommandStatus


class FakeRunner:
    """Stands in for BdRunner, replaying a fixed result and recording calls."""

    def __init__(self, result: CommandResult) -> None:
        self.result = result
        self.calls: list[tuple[str, ...]] = []

    async def run(self, *args: str) -> CommandResult:
        self.calls.append(args)
        return self.result.model_copy(update={"args": list(args)})

    async def output(self, *args: str) -> str | None:
        result = await self.run(*args)
        return result.output


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Project directory where `bd init` has been run."""
    (tmp_path / ".beads").mkdir()
    return tmp_path


@pytest.fixture
def client() -> Mock:
    """Host client whose session.prompt is awaitable."""
    host = Mock()
    host.session.prompt = AsyncMock(return_value=None)
    return host


@pytest.fixture
def prime_runner() -> FakeRunner:
    """Runner whose bd calls succeed with some prime output."""
    return FakeRunner(
        CommandResult(
            args=[], status=CommandStatus.SUCCESS, stdout="T", returncode=0
        )
    )


@pytest.fixture
def failing_runner() -> FakeRunner:
    """Runner whose bd calls exit non-zero."""
    return FakeRunner(
        CommandResult(
            args=[], status=CommandStatus.FAILED, returncode=1, reason="boom"
        )
    )


@pytest.fixture
def empty_runner() -> FakeRunner:
    """Runner whose bd calls succeed with no output."""
    return FakeRunner(
        CommandResult(args=[], status=CommandStatus.SUCCESS, stdout="", returncode=0)
    )
