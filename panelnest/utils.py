"""Shared utilities for panelnest."""

import logging
from pathlib import Path
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

# Logs go to stderr, command output to stdout
err_console = Console(stderr=True)


def make_log_handler() -> RichHandler:
    """Rich log handler writing to stderr."""
    return RichHandler(console=err_console, rich_tracebacks=True)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Set up logging with Rich handler."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[make_log_handler()],
    )
    return logging.getLogger("panelnest")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return logging.getLogger(f"panelnest.{name}")


def ensure_dir(path: Union[str, Path]) -> Path:
    """Ensure a directory exists and return the Path."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
