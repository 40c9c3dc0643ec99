"""Options shared by every command that targets a config file."""

from __future__ import annotations

import typer
import yaml

from appconf.builder import Builder
from appconf.codecs import get_codec
from appconf.context import ConfigContext
from appconf.environment import EnvironmentManager
from appconf.errors import AppConfError

APP_OPTION = typer.Option(
    None,
    "--app",
    help="Application name; the file lives in $XDG_CONFIG_HOME/<app>.",
)
USER_APP_OPTION = typer.Option(
    None,
    "--user-app",
    help="Application name; the file lives in the platform's per-user config directory.",
)
DIR_OPTION = typer.Option(None, "--dir", help="Directory holding the config file. Defaults to '.'.")
FILE_OPTION = typer.Option(None, "--file", help="Config filename. Defaults to config.<format>.")
FORMAT_OPTION = typer.Option("json", "--format", "-f", help="Encoding: json, toml or yaml.")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log path resolution and file access.")

# Failures reported at the command boundary; decode errors from json and
# tomllib are ValueError subclasses.
CONFIG_ERRORS = (AppConfError, OSError, TypeError, ValueError, yaml.YAMLError)


def resolve_context(
    environment: EnvironmentManager,
    *,
    app_name: str | None,
    user_app: str | None,
    directory: str | None,
    filename: str | None,
    fmt: str,
) -> ConfigContext:
    locations = [value for value in (app_name, user_app, directory) if value]
    if len(locations) > 1:
        raise typer.BadParameter("Choose only one of --app, --user-app or --dir.")

    try:
        codec = get_codec(fmt)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error

    builder = Builder(environment)
    if directory:
        builder.directory(directory)
    if app_name:
        builder.app(app_name)
    if user_app:
        builder.user_app(user_app)
    if filename:
        builder.file(filename)
    return builder.codec(codec).create()
