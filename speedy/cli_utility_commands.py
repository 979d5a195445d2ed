"""Utility CLI commands - doctor, version."""
import subprocess
import sys

import typer
from rich.console import Console
from rich.table import Table

from speedy import __version__
from speedy.core.config import get_config
from speedy.core.errors import ScaffoldError

# Module-level console instance (will be set by register function)
console: Console = Console()


def _tool_version(executable: str, flag: str = "--version"):
    """Return the first line of ``executable --version`` or None if unavailable."""
    try:
        result = subprocess.run([executable, flag], capture_output=True, text=True)
    except FileNotFoundError:
        return None
    if result.returncode != 0:
        return None
    return (result.stdout.strip().splitlines() or [""])[0]


def doctor():
    """Check that the external tools Speedy relies on are installed."""
    from speedy.cli_support import handle_cli_error

    try:
        config = get_config()
    except ScaffoldError as e:
        handle_cli_error(e, console)

    console.print("\n[bold cyan]🔍 Speedy Doctor[/bold cyan]\n")

    checks = [
        (config.package_runner, "create, install, run"),
        (config.package_executor, "tailwindcss / prisma init"),
        ("docker", "database container (optional)"),
    ]
    if sys.platform == "darwin":
        checks.append(("osascript", "open dev servers in Terminal"))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Tool")
    table.add_column("Used for")
    table.add_column("Status")

    missing = []
    for executable, purpose in checks:
        version = _tool_version(executable)
        if version is None:
            status = "[red]✗ not found[/red]"
            missing.append(executable)
        else:
            status = f"[green]✓[/green] {version}"
        table.add_row(executable, purpose, status)

    console.print(table)

    if config.package_runner in missing:
        console.print(f"\n[red]✗[/red] {config.package_runner} is required. "
                      "See https://bun.sh for installation.")
        raise typer.Exit(1)


def version():
    """Show Speedy version."""
    console.print(f"Speedy v{__version__}")


def register_utility_commands(app: typer.Typer, shared_console: Console):
    """Register utility commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(doctor)
    app.command()(version)
