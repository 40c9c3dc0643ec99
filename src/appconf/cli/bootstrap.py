"""Shared runtime setup for CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

from appconf.environment import EnvironmentManager
from appconf.logging_setup import configure_logging


@dataclass(frozen=True, slots=True)
class RuntimeContext:
    console: Console
    environment: EnvironmentManager


def _load_env_files() -> None:
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)


def bootstrap_runtime(*, verbose: bool = False) -> RuntimeContext:
    _load_env_files()
    console = Console(soft_wrap=True)
    environment = EnvironmentManager()
    configure_logging(console, verbosity="verbose" if verbose else None, environment=environment)
    return RuntimeContext(console=console, environment=environment)
