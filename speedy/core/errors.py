"""Error types raised while scaffolding a project.

Every error is fatal: the CLI prints it and exits with status 1.
"""
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from speedy.services.tools import ToolResult


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""
    pass


class ValidationError(ScaffoldError):
    """Raised when required input is missing or malformed."""
    pass


class ProjectIOError(ScaffoldError):
    """Raised when a filesystem operation fails."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ExternalToolError(ScaffoldError):
    """Raised when a generator, installer or initializer exits non-zero."""

    def __init__(self, step: str, result: Optional["ToolResult"] = None):
        self.step = step
        self.result = result
        message = step
        if result is not None:
            message = f"{step} (`{result.command}` exited with {result.returncode})"
        super().__init__(message)

    @property
    def returncode(self) -> Optional[int]:
        return self.result.returncode if self.result is not None else None
