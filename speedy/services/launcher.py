"""Fire-and-forget launching of dev servers in separate terminal sessions.

Launched processes are never awaited, monitored or stopped by Speedy.
"""
import shlex
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from speedy.core.config import get_config
from speedy.core.logger import get_logger

logger = get_logger(__name__)


class ProcessLauncher:
    """Starts a long-running command in its own terminal session."""

    def __init__(self, terminal_app: Optional[str] = None, mock: bool = False,
                 platform: Optional[str] = None):
        self.terminal_app = terminal_app or get_config().terminal_app
        self.mock = mock
        self.platform = platform or sys.platform
        # Held only so the handles outlive launch(); never waited on
        self.processes: List[subprocess.Popen] = []

    def launch(self, command: List[str], cwd: Path) -> None:
        """Start ``command`` in ``cwd`` and return immediately.

        On macOS a new tab of the configured terminal app runs the command;
        elsewhere the command is started detached in a new session with its
        output discarded, so it never writes into the calling shell.
        """
        shell_command = f"cd {shlex.quote(str(cwd))} && {shlex.join(command)}"

        if self.mock:
            logger.info(f"MOCK: Would launch '{shell_command}'")
            return

        if self.platform == "darwin":
            script = (
                f'tell application "{self.terminal_app}"\n'
                f'    do script "{_applescript_escape(shell_command)}"\n'
                f'end tell'
            )
            argv, workdir = ["osascript", "-e", script], None
        else:
            argv, workdir = command, str(cwd)

        try:
            process = subprocess.Popen(
                argv,
                cwd=workdir,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.STDOUT,
                start_new_session=True,
            )
        except OSError as e:
            logger.warning(f"Could not launch '{shell_command}': {e}")
            return

        self.processes.append(process)
        logger.info(f"🚀 Launched: {shell_command}")


def _applescript_escape(text: str) -> str:
    """Escape a string for embedding in an AppleScript string literal."""
    return text.replace("\\", "\\\\").replace('"', '\\"')
