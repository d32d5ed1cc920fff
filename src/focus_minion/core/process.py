"""
External process execution for Focus Minion.

Every OS integration (osascript, open, afplay) goes through this module so
callers can be tested by patching two functions.
"""

import shutil
import subprocess
import sys
from typing import NamedTuple, Optional, Sequence

from loguru import logger


class CommandResult(NamedTuple):
    """Captured output of a finished command."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0


def run_command(
    cmd: Sequence[str], timeout: Optional[float] = None
) -> CommandResult:
    """Run a command to completion and capture its output.

    Args:
        cmd: Command name followed by its arguments
        timeout: Seconds to wait before giving up (None waits forever)

    Returns:
        CommandResult with decoded stdout/stderr and the exit status

    Raises:
        FileNotFoundError: If the command does not exist
        subprocess.TimeoutExpired: If the command outlives the timeout
        OSError: For other spawn failures
    """
    logger.debug(f"Running command: {cmd[0]} ({len(cmd) - 1} args)")
    result = subprocess.run(
        list(cmd),
        capture_output=True,
        text=True,
        timeout=timeout,
    )
    if result.returncode != 0:
        logger.debug(
            f"Command {cmd[0]} exited with {result.returncode}: {result.stderr.strip()}"
        )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def spawn_command(cmd: Sequence[str]) -> bool:
    """Start a command without waiting for it (fire-and-forget).

    Returns:
        True if the process was spawned, False otherwise
    """
    try:
        subprocess.Popen(
            list(cmd),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
        )
        return True
    except (subprocess.SubprocessError, OSError) as e:
        logger.debug(f"Failed to spawn {cmd[0]}: {e}")
        return False


def check_platform_support() -> tuple[bool, str]:
    """Check that the macOS scripting tools are available.

    Returns:
        Tuple of (supported, reason). Reason is empty when supported.
    """
    if sys.platform != "darwin":
        return False, f"Focus Minion drives macOS audio; running on {sys.platform}."

    missing = [tool for tool in ("osascript", "open", "afplay") if not shutil.which(tool)]
    if missing:
        return False, f"Missing system tools: {', '.join(missing)}"

    return True, ""
