"""Run the bd CLI as a subprocess."""

import asyncio
import logging
import shutil
from pathlib import Path

from .config import DEFAULT_EXECUTABLE
from .models import CommandResult, CommandStatus

logger = logging.getLogger(__name__)


class BdRunner:
    """Invoke bd and capture its output.

    Arguments are passed to the child process as separate argv entries and
    never go through a shell, so ``run("prime", "--stealth")`` reaches bd as
    two arguments rather than one.
    """

    def __init__(
        self,
        executable: str = DEFAULT_EXECUTABLE,
        cwd: Path | str | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            executable: bd executable name (looked up on PATH) or path
            cwd: Working directory for bd, usually the project root
        """
        self.executable = executable
        self.cwd = Path(cwd) if cwd is not None else None

    def which(self) -> str | None:
        """Resolve the executable on PATH, or None if it cannot be found."""
        return shutil.which(self.executable)

    async def run(self, *args: str) -> CommandResult:
        """Run bd with ``args`` and wait for it to exit.

        Never raises for tool problems: a missing executable, a non-zero exit
        status or an OS error is reported through the returned result.
        """
        argv = [str(arg) for arg in args]
        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=self.cwd,
            )
            stdout, stderr = await process.communicate()
        except FileNotFoundError as e:
            if e.filename != self.executable:
                # e.g. the working directory is gone
                logger.warning(f"Could not run {self.executable}: {e}")
                return CommandResult(
                    args=argv, status=CommandStatus.ERROR, reason=str(e)
                )
            logger.debug(f"{self.executable} not found: {e}")
            return CommandResult(
                args=argv, status=CommandStatus.NOT_FOUND, reason=str(e)
            )
        except OSError as e:
            logger.warning(f"Could not run {self.executable} {' '.join(argv)}: {e}")
            return CommandResult(args=argv, status=CommandStatus.ERROR, reason=str(e))

        if process.returncode != 0:
            reason = stderr.decode("utf-8", errors="replace").strip()
            logger.warning(
                f"{self.executable} {' '.join(argv)} exited with "
                f"{process.returncode}: {reason}"
            )
            return CommandResult(
                args=argv,
                status=CommandStatus.FAILED,
                returncode=process.returncode,
                reason=reason or None,
            )

        return CommandResult(
            args=argv,
            status=CommandStatus.SUCCESS,
            stdout=stdout.decode("utf-8", errors="replace").strip(),
            returncode=process.returncode,
        )

    async def output(self, *args: str) -> str | None:
        """Run bd and return its trimmed stdout, or None on failure or empty output."""
        result = await self.run(*args)
        return result.output
