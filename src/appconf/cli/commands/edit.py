"""Implementation of the `set` and `unset` commands."""

from __future__ import annotations

from typing import Any

import typer
import yaml
from rich.markup import escape

from appconf.repository import ConfigRepository, FileConfigRepository

from ..bootstrap import bootstrap_runtime
from ..options import (
    APP_OPTION,
    CONFIG_ERRORS,
    DIR_OPTION,
    FILE_OPTION,
    FORMAT_OPTION,
    USER_APP_OPTION,
    VERBOSE_OPTION,
    resolve_context,
)

KEY_ARGUMENT = typer.Argument(..., help="Dotted key, e.g. server.port.")
VALUE_ARGUMENT = typer.Argument(..., help="Value, parsed as a YAML scalar (3, true, null, text).")


class _ValueLoader(yaml.SafeLoader):
    """Safe loader that leaves dates and timestamps as strings."""


_ValueLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_value(raw: str) -> Any:
    try:
        return yaml.load(raw, Loader=_ValueLoader)
    except yaml.YAMLError:
        return raw


def _split_key(key: str) -> list[str]:
    parts = [part for part in key.split(".") if part]
    if not parts:
        raise typer.BadParameter(f"Invalid key {key!r}.")
    return parts


def assign_key(config: dict[str, Any], key: str, value: Any) -> None:
    parts = _split_key(key)
    node = config
    for index, part in enumerate(parts[:-1]):
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            prefix = ".".join(parts[: index + 1])
            raise ValueError(f"Cannot set {key}: {prefix} is not a table.")
        node = child
    node[parts[-1]] = value


def remove_key(config: dict[str, Any], key: str) -> bool:
    parts = _split_key(key)
    node: Any = config
    for part in parts[:-1]:
        node = node.get(part) if isinstance(node, dict) else None
        if node is None:
            return False
    if not isinstance(node, dict) or parts[-1] not in node:
        return False
    del node[parts[-1]]
    return True


def register(app: typer.Typer) -> None:
    """Register the `set` and `unset` commands."""

    @app.command("set")
    def set_(
        key: str = KEY_ARGUMENT,
        value: str = VALUE_ARGUMENT,
        app_name: str | None = APP_OPTION,
        user_app: str | None = USER_APP_OPTION,
        directory: str | None = DIR_OPTION,
        filename: str | None = FILE_OPTION,
        fmt: str = FORMAT_OPTION,
        verbose: bool = VERBOSE_OPTION,
    ) -> None:
        """Store VALUE under KEY, creating the file and directory when missing."""
        context = bootstrap_runtime(verbose=verbose)
        console = context.console
        config = resolve_context(
            context.environment,
            app_name=app_name,
            user_app=user_app,
            directory=directory,
            filename=filename,
            fmt=fmt,
        )
        repository: ConfigRepository[dict[str, Any]] = FileConfigRepository(config, dict)

        try:
            stored = repository.load()
            assign_key(stored, key, parse_value(value))
            repository.save(stored)
        except CONFIG_ERRORS as error:
            console.print(f"[red]Could not update {escape(str(config.path))}: {escape(str(error))}[/]")
            raise typer.Exit(2) from error

        console.print(f"[green]Set {escape(key)} in {escape(str(config.path))}[/]")

    @app.command("unset")
    def unset(
        key: str = KEY_ARGUMENT,
        app_name: str | None = APP_OPTION,
        user_app: str | None = USER_APP_OPTION,
        directory: str | None = DIR_OPTION,
        filename: str | None = FILE_OPTION,
        fmt: str = FORMAT_OPTION,
        verbose: bool = VERBOSE_OPTION,
    ) -> None:
        """Remove KEY from the stored config."""
        context = bootstrap_runtime(verbose=verbose)
        console = context.console
        config = resolve_context(
            context.environment,
            app_name=app_name,
            user_app=user_app,
            directory=directory,
            filename=filename,
            fmt=fmt,
        )
        repository: ConfigRepository[dict[str, Any]] = FileConfigRepository(config, dict)

        try:
            stored = repository.load()
            removed = remove_key(stored, key)
            if removed:
                repository.save(stored)
        except CONFIG_ERRORS as error:
            console.print(f"[red]Could not update {escape(str(config.path))}: {escape(str(error))}[/]")
            raise typer.Exit(2) from error

        if not removed:
            console.print(f"[yellow]Key {escape(key)} not found in {escape(str(config.path))}[/]")
            raise typer.Exit(1)
        console.print(f"[green]Removed {escape(key)} from {escape(str(config.path))}[/]")
