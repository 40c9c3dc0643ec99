"""Typer application wiring for the appconf CLI."""

from __future__ import annotations

import typer

from .commands import edit, view

app = typer.Typer(
    name="appconf",
    help="Inspect and edit application config files.",
    no_args_is_help=True,
    add_completion=False,
)

view.register(app)
edit.register(app)
