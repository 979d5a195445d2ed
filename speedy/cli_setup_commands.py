"""Setup CLI commands - setup, quick."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from speedy.core.errors import ScaffoldError
from speedy.scaffold.core import (
    ScaffoldManager,
    ScaffoldOptions,
    next_steps,
    validate_project_name,
)

# Module-level console instance (will be set by register function)
console: Console = Console()


def _prompt_project_name() -> str:
    raw = typer.prompt("Enter the name for the new directory", default="", show_default=False)
    return validate_project_name(raw)


def _print_next_steps(project_dir, options: ScaffoldOptions) -> None:
    console.print("\n[cyan]Next steps:[/cyan]")
    for number, step in enumerate(next_steps(project_dir, options), start=1):
        console.print(f"  {number}. {step}", soft_wrap=True)


def setup(
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o",
                                              help="Parent directory for the project (default: current dir)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to this file"),
):
    """Scaffold a Vite/React/TypeScript frontend and a Bun/Express backend.

    Tailwind CSS is always wired into the frontend. You will be asked whether
    to add React Router and whether to add Prisma with a PostgreSQL container.

    Examples:
        speedy setup                 # Create ./<name>
        speedy setup -o ~/projects   # Create ~/projects/<name>
    """
    from speedy.cli_support import (
        ask_yes_no,
        handle_cli_error,
        is_mock,
        print_success,
        setup_file_logging,
    )

    if verbose or log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)

    console.print("This will set up a Vite/React/TypeScript frontend with Tailwind CSS "
                  "and a Bun/Express backend.")

    try:
        name = _prompt_project_name()
        options = ScaffoldOptions(
            with_styling=True,
            with_router=ask_yes_no("Do you want to install React Router?"),
            with_database=ask_yes_no("Do you need a database (Prisma + PostgreSQL)?"),
        )

        manager = ScaffoldManager(mock=is_mock())
        project_root = manager.scaffold_project(name, options, output_dir=output_dir)
    except ScaffoldError as e:
        handle_cli_error(e, console, verbose=verbose)

    print_success(console, f"Project created at {project_root}")
    _print_next_steps(name if output_dir is None else project_root, options)


def quick(
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o",
                                              help="Parent directory for the project (default: current dir)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to this file"),
):
    """Scaffold a plain frontend and backend, then start both dev servers.

    Each dev server opens in its own terminal session. Speedy does not wait
    for them or stop them.
    """
    from speedy.cli_support import handle_cli_error, is_mock, print_success, setup_file_logging

    if verbose or log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)

    console.print("This will set up a Vite/React/TypeScript frontend and a basic Bun/Express backend.")

    options = ScaffoldOptions(with_styling=False, launch_servers=True)
    try:
        name = _prompt_project_name()
        manager = ScaffoldManager(mock=is_mock())
        project_root = manager.scaffold_project(name, options, output_dir=output_dir)
    except ScaffoldError as e:
        handle_cli_error(e, console, verbose=verbose)

    print_success(console, f"Project created at {project_root}")
    console.print("Frontend and backend servers are now running.")


def register_setup_commands(app: typer.Typer, shared_console: Console):
    """Register setup commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(setup)
    app.command()(quick)
