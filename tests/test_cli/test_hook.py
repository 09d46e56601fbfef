"""Tests for the hook and check CLI commands."""

import stat
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from beads_bridge.cli.main import app

runner = CliRunner()

FAKE_BD = """#!{python}
import pathlib, sys
log = pathlib.Path(__file__).with_suffix(".log")
with log.open("a") as f:
    f.write(" ".join(sys.argv[1:]) + "\\n")
if sys.argv[1:] == ["prime"]:
    print("T")
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BEADS_DISABLE_PRIME",
        "BEADS_DISABLE_COMPACT",
        "BEADS_DISABLE_IDLE",
        "BEADS_SYNC_ON_IDLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_bd(tmp_path: Path) -> Path:
    """Executable that prints "T" for `prime` and logs every invocation."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "bd"
    script.write_text(FAKE_BD.format(python=sys.executable))
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return script


def calls(fake_bd: Path) -> list[str]:
    log = fake_bd.with_suffix(".log")
    if not log.exists():
        return []
    return log.read_text().splitlines()


class TestHookCommand:
    """Test `beads-bridge hook`."""

    def test_session_start_prints_context(
        self, project_dir: Path, fake_bd: Path
    ) -> None:
        result = runner.invoke(
            app, ["hook", "session-start", "-C", str(project_dir), "--bd", str(fake_bd)]
        )
        assert result.exit_code == 0
        assert result.stdout == "## Beads Issue Tracker Context\n\nT\n"
        assert calls(fake_bd) == ["prime"]

    def test_pre_compact_prints_context(
        self, project_dir: Path, fake_bd: Path
    ) -> None:
        result = runner.invoke(
            app, ["hook", "pre-compact", "-C", str(project_dir), "--bd", str(fake_bd)]
        )
        assert result.exit_code == 0
        assert "## Beads Issue Tracker Context\n\nT" in result.stdout

    def test_no_marker_prints_nothing(self, tmp_path: Path, fake_bd: Path) -> None:
        """Test the hook is silent and skips bd outside beads projects."""
        project = tmp_path / "project"
        project.mkdir()
        result = runner.invoke(
            app, ["hook", "session-start", "-C", str(project), "--bd", str(fake_bd)]
        )
        assert result.exit_code == 0
        assert result.stdout == ""
        assert calls(fake_bd) == []

    def test_missing_bd_prints_nothing(self, project_dir: Path) -> None:
        result = runner.invoke(
            app,
            [
                "hook",
                "session-start",
                "-C",
                str(project_dir),
                "--bd",
                "beads-bridge-no-such-bd-binary",
            ],
        )
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_disable_prime(self, project_dir: Path, fake_bd: Path) -> None:
        result = runner.invoke(
            app,
            ["hook", "session-start", "-C", str(project_dir), "--bd", str(fake_bd)],
            env={"BEADS_DISABLE_PRIME": "1"},
        )
        assert result.exit_code == 0
        assert result.stdout == ""
        assert calls(fake_bd) == []

    def test_disable_compact(self, project_dir: Path, fake_bd: Path) -> None:
        result = runner.invoke(
            app,
            ["hook", "pre-compact", "-C", str(project_dir), "--bd", str(fake_bd)],
            env={"BEADS_DISABLE_COMPACT": "1"},
        )
        assert result.exit_code == 0
        assert result.stdout == ""
        assert calls(fake_bd) == []

    def test_idle_runs_sync_when_enabled(
        self, project_dir: Path, fake_bd: Path
    ) -> None:
        result = runner.invoke(
            app,
            ["hook", "idle", "-C", str(project_dir), "--bd", str(fake_bd)],
            env={"BEADS_SYNC_ON_IDLE": "1"},
        )
        assert result.exit_code == 0
        assert result.stdout == ""
        assert calls(fake_bd) == ["sync"]

    def test_idle_does_nothing_by_default(
        self, project_dir: Path, fake_bd: Path
    ) -> None:
        result = runner.invoke(
            app, ["hook", "idle", "-C", str(project_dir), "--bd", str(fake_bd)]
        )
        assert result.exit_code == 0
        assert calls(fake_bd) == []

    def test_unknown_hook_rejected(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["hook", "post-tool", "-C", str(project_dir)])
        assert result.exit_code != 0


class TestCheckCommand:
    """Test `beads-bridge check`."""

    def test_ready(self, project_dir: Path, fake_bd: Path) -> None:
        result = runner.invoke(
            app, ["check", "-C", str(project_dir), "--bd", str(fake_bd)]
        )
        assert result.exit_code == 0
        assert "Beads bridge is ready" in result.stdout

    def test_missing_marker(self, tmp_path: Path, fake_bd: Path) -> None:
        project = tmp_path / "project"
        project.mkdir()
        result = runner.invoke(
            app, ["check", "-C", str(project), "--bd", str(fake_bd)]
        )
        assert result.exit_code == 1
        assert "bd init" in result.stdout

    def test_missing_bd(self, project_dir: Path) -> None:
        result = runner.invoke(
            app,
            ["check", "-C", str(project_dir), "--bd", "beads-bridge-no-such-bd-binary"],
        )
        assert result.exit_code == 1
        assert "not found" in result.stdout
