"""Constants used throughout the appconf package."""

from __future__ import annotations

import logging

DEFAULT_DIRECTORY = "."
DEFAULT_FILENAME = "config"

JSON_FILENAME = "config.json"
TOML_FILENAME = "config.toml"
YAML_FILENAME = "config.yaml"
JSON_INDENT = 4

# Reduced by the process umask.
DIRECTORY_MODE = 0o777
FILE_MODE = 0o666

CONFIG_HOME_ENV_VAR = "XDG_CONFIG_HOME"

DEFAULT_VERBOSITY = "quiet"
VERBOSITY_ENV_VAR = "APPCONF_LOG_LEVEL"
VERBOSITY_PRESETS = {
    "quiet": logging.WARNING,
    "standard": logging.INFO,
    "verbose": logging.DEBUG,
}
