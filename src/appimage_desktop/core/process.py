"""External process abstraction.

Every external command (AppImage self-extraction, privileged symlink
operations, desktop database refresh) goes through CommandRunner with a
discrete argument list; nothing is ever interpolated into a shell string.
"""

import os
import shlex
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from appimage_desktop.constants import DEFAULT_PRIVILEGE_COMMAND
from appimage_desktop.logger import get_logger

logger = get_logger(__name__)


class CommandRunner:
    """Runs external commands and reports their captured output."""

    def __init__(
        self, privilege_command: str = DEFAULT_PRIVILEGE_COMMAND
    ) -> None:
        """Initialize the runner.

        Args:
            privilege_command: Command prefix used for privileged operations
                (e.g. "sudo" or "doas"); empty runs them unprivileged

        """
        self.privilege_command = shlex.split(privilege_command)

    def run(
        self, args: Sequence[str], cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        """Run a command and capture stdout/stderr as text.

        Args:
            args: Program and its arguments
            cwd: Working directory for the child process

        Returns:
            Completed process; the caller inspects returncode

        Raises:
            OSError: If the program cannot be executed at all

        """
        logger.debug("Running command: %s", shlex.join(args))
        result = subprocess.run(  # noqa: S603
            list(args),
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
        logger.debug("Command exited with code %d", result.returncode)
        return result

    def run_privileged(
        self, args: Sequence[str]
    ) -> subprocess.CompletedProcess[str]:
        """Run a command with elevated privileges.

        The privilege prefix is skipped when already running as root.

        Args:
            args: Program and its arguments

        Returns:
            Completed process

        Raises:
            OSError: If the program or privilege command cannot be executed

        """
        prefix = [] if os.geteuid() == 0 else self.privilege_command
        return self.run([*prefix, *args])

    @staticmethod
    def which(name: str) -> str | None:
        """Return the path of an executable found on PATH, if any."""
        return shutil.which(name)
