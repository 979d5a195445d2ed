"""Blocking wrappers around bun/bunx.

Each capability owns one executable and exposes ``run(args, cwd)``. Output is
streamed straight to the terminal; only the exit status is captured.
"""
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from speedy.core.config import get_config
from speedy.core.logger import get_logger

logger = get_logger(__name__)

# Shell convention for "command not found"
MISSING_EXECUTABLE = 127


@dataclass
class ToolResult:
    """Outcome of one external invocation."""

    args: List[str] = field(default_factory=list)
    returncode: int = 0

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command(self) -> str:
        return shlex.join(self.args)


class ExternalTool:
    """Runs a single external executable to completion."""

    name = "tool"

    def __init__(self, executable: str, mock: bool = False):
        self.executable = executable
        self.mock = mock

    def run(self, args: List[str], cwd: Path) -> ToolResult:
        """Run the executable with ``args`` inside ``cwd`` and wait for it.

        A missing executable is reported as exit status 127 rather than raised,
        so callers handle every failure through the returned result.
        """
        cmd = [self.executable, *args]
        command = shlex.join(cmd)

        if self.mock:
            logger.info(f"MOCK: Would run {command} in {cwd}")
            return ToolResult(args=cmd, returncode=0)

        logger.debug(f"Running {self.name}: {command} (cwd={cwd})")
        try:
            completed = subprocess.run(cmd, cwd=str(cwd), check=False)
        except FileNotFoundError:
            logger.error(f"{self.executable} not found on PATH")
            return ToolResult(args=cmd, returncode=MISSING_EXECUTABLE)

        if completed.returncode != 0:
            logger.debug(f"{command} exited with {completed.returncode}")
        return ToolResult(args=cmd, returncode=completed.returncode)


class ProjectGenerator(ExternalTool):
    """Creates project skeletons (``bun create vite``, ``bun init``)."""

    name = "generator"

    def __init__(self, executable: Optional[str] = None, mock: bool = False):
        super().__init__(executable or get_config().package_runner, mock=mock)


class PackageInstaller(ExternalTool):
    """Installs dependencies (``bun install``, ``bun add``)."""

    name = "installer"

    def __init__(self, executable: Optional[str] = None, mock: bool = False):
        super().__init__(executable or get_config().package_runner, mock=mock)


class SchemaInitializer(ExternalTool):
    """Runs package binaries that emit config files (``bunx prisma init``)."""

    name = "initializer"

    def __init__(self, executable: Optional[str] = None, mock: bool = False):
        super().__init__(executable or get_config().package_executor, mock=mock)
