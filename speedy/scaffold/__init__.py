"""Web project scaffolding system.

Creates a Vite/React frontend and a Bun/Express backend, with optional
Tailwind CSS, React Router and Prisma/PostgreSQL layers.
"""

from .core import ScaffoldManager, ScaffoldOptions, next_steps

__all__ = [
    "ScaffoldManager",
    "ScaffoldOptions",
    "next_steps",
]
