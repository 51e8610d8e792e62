"""
External process and file access used by the volume operations.
"""
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""
    ok: bool
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None


class CommandRunner:
    """Runs executables with an argument list and captures their output."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, executable: str, args: Sequence[str],
            input: Optional[str] = None) -> CommandResult:
        """
        Run ``executable`` with ``args``.

        Args:
            executable: Program name, looked up on PATH
            args: Argument list passed verbatim, never through a shell
            input: Optional text fed to stdin; stdin is closed otherwise

        Returns:
            CommandResult with ``ok`` False on non-zero exit, timeout or a
            missing executable
        """
        cmd = [executable, *args]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            process = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                **({'input': input} if input is not None else {'stdin': subprocess.DEVNULL}),
            )
        except FileNotFoundError:
            logger.error(f"Executable not found: {executable}")
            return CommandResult(ok=False)
        except subprocess.TimeoutExpired:
            logger.error(f"Command timed out after {self.timeout}s: {' '.join(cmd)}")
            return CommandResult(ok=False)

        if process.returncode != 0:
            logger.warning(
                f"Command exited with {process.returncode}: {' '.join(cmd)}"
                + (f"\n{process.stderr.strip()}" if process.stderr else "")
            )

        return CommandResult(
            ok=process.returncode == 0,
            stdout=process.stdout or "",
            stderr=process.stderr or "",
            returncode=process.returncode,
        )


def read_text(path: str) -> str:
    """Read a file's contents as UTF-8 text."""
    return Path(path).read_text(encoding='utf-8')
