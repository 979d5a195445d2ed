"""Wrappers around the external programs Speedy delegates to."""

from .launcher import ProcessLauncher
from .tools import (
    ExternalTool,
    PackageInstaller,
    ProjectGenerator,
    SchemaInitializer,
    ToolResult,
)

__all__ = [
    "ExternalTool",
    "PackageInstaller",
    "ProcessLauncher",
    "ProjectGenerator",
    "SchemaInitializer",
    "ToolResult",
]
