"""Environment adapters used while resolving config locations."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .constants import CONFIG_HOME_ENV_VAR, DEFAULT_VERBOSITY, VERBOSITY_ENV_VAR, VERBOSITY_PRESETS


def normalize_verbosity_label(value: str | None) -> str | None:
    if value is None:
        return None
    label = value.strip().lower()
    return label if label in VERBOSITY_PRESETS else None


class EnvironmentManager:
    """Thin wrapper around environment access to aid testing and reuse."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def getenv(self, key: str) -> str | None:
        return self._environ.get(key)

    def config_home(self) -> str:
        """Return the base config directory, or an empty string when unset."""
        return self.getenv(CONFIG_HOME_ENV_VAR) or ""

    def resolve_log_level(self, verbosity: str | None = None, default: int | None = None) -> int:
        label = normalize_verbosity_label(self.getenv(VERBOSITY_ENV_VAR))
        if label is None:
            label = normalize_verbosity_label(verbosity)

        if label is None:
            fallback = VERBOSITY_PRESETS[DEFAULT_VERBOSITY]
            return fallback if default is None else default

        return VERBOSITY_PRESETS[label]
