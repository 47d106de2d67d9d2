"""Command-line interface for panelnest."""

from panelnest.cli.main import cli

__all__ = ["cli"]
