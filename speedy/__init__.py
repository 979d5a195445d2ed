"""Speedy - scaffold a Vite/React frontend and a Bun/Express backend in one go."""

__version__ = "1.0.0"
