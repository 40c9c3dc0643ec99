"""Logging configuration for the appconf command-line interface."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .environment import EnvironmentManager


def configure_logging(
    console: Console | None = None,
    *,
    verbosity: str | None = None,
    environment: EnvironmentManager | None = None,
) -> int:
    """Route appconf log records through rich and return the chosen level."""
    level = (environment or EnvironmentManager()).resolve_log_level(verbosity)
    handler = RichHandler(console=console, show_path=False, markup=True)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("appconf")
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return level
