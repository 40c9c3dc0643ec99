"""Implementation of the read-only `path` and `show` commands."""

from __future__ import annotations

import typer
from rich.markup import escape

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


def register(app: typer.Typer) -> None:
    """Register the `path` and `show` commands."""

    @app.command("path")
    def path(
        app_name: str | None = APP_OPTION,
        user_app: str | None = USER_APP_OPTION,
        directory: str | None = DIR_OPTION,
        filename: str | None = FILE_OPTION,
        fmt: str = FORMAT_OPTION,
        verbose: bool = VERBOSE_OPTION,
    ) -> None:
        """Print the resolved config file path."""
        context = bootstrap_runtime(verbose=verbose)
        config = resolve_context(
            context.environment,
            app_name=app_name,
            user_app=user_app,
            directory=directory,
            filename=filename,
            fmt=fmt,
        )
        context.console.print(str(config.path), markup=False, highlight=False)

    @app.command("show")
    def show(
        app_name: str | None = APP_OPTION,
        user_app: str | None = USER_APP_OPTION,
        directory: str | None = DIR_OPTION,
        filename: str | None = FILE_OPTION,
        fmt: str = FORMAT_OPTION,
        verbose: bool = VERBOSE_OPTION,
    ) -> None:
        """Print the stored config."""
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

        if not config.path.exists():
            console.print(f"[yellow]No config file at {escape(str(config.path))}[/]")
            raise typer.Exit(0)

        try:
            value = config.read()
            rendered = config.encode(value).decode("utf-8") if config.encode else repr(value)
        except CONFIG_ERRORS as error:
            console.print(f"[red]Could not read {escape(str(config.path))}: {escape(str(error))}[/]")
            raise typer.Exit(2) from error

        console.print(rendered, markup=False, highlight=False)
