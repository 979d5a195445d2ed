#!/usr/bin/env python3
"""Speedy CLI - Scaffold a full-stack web project in one command."""

import typer
from rich.console import Console

from speedy.cli_setup_commands import register_setup_commands
from speedy.cli_utility_commands import register_utility_commands

app = typer.Typer(
    name="speedy",
    help="""Speedy - Scaffold a Vite/React frontend and a Bun/Express backend

Quick start:
  speedy setup     # Frontend + backend, Tailwind, optional router and database
  speedy quick     # Frontend + backend, then start both dev servers
  speedy doctor    # Check that bun is installed

More commands: speedy --help
""",
    add_completion=False,
)

console = Console()

register_setup_commands(app, console)
register_utility_commands(app, console)


def main():
    app()


if __name__ == "__main__":
    main()
