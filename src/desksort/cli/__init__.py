"""Command-line interface for DeskSort."""

from .main import cli

__all__ = ["cli"]
