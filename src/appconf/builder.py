"""Fluent builder for :class:`~appconf.context.ConfigContext`.

Sets up a JSON file ``config.json`` in the current directory::

    ctx = build().json().create()

Sets up ``$XDG_CONFIG_HOME/yourapp/config.json``::

    ctx = build().app("yourapp").json().create()

Defaults are only applied by :meth:`Builder.create`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from platformdirs import user_config_dir

from .codecs import JSON, Codec, Marshal, Unmarshal
from .constants import DEFAULT_DIRECTORY, DEFAULT_FILENAME
from .context import ConfigContext
from .environment import EnvironmentManager

logger = logging.getLogger(__name__)


class Builder:
    def __init__(self, environment: EnvironmentManager | None = None) -> None:
        self._environment = environment or EnvironmentManager()
        self._directory = ""
        self._filename = ""
        self._encode: Marshal | None = None
        self._decode: Unmarshal | None = None

    def directory(self, path: str) -> Builder:
        self._directory = path
        return self

    def file(self, name: str) -> Builder:
        self._filename = name
        return self

    def app(self, name: str, *, base_dir: str | None = None) -> Builder:
        """
        Place the config in ``<base_dir>/<name>``.

        Without ``base_dir`` the base is ``$XDG_CONFIG_HOME``, read now. An
        unset variable yields ``/<name>``; that path is used as-is.
        """
        base = base_dir if base_dir is not None else self._environment.config_home()
        self._directory = base + "/" + name
        logger.debug("Resolved application config directory %s", self._directory)
        return self

    def user_app(self, name: str, *, author: str | None = None) -> Builder:
        """Place the config in the platform's per-user config directory for ``name``."""
        self._directory = user_config_dir(name, author)
        logger.debug("Resolved user config directory %s", self._directory)
        return self

    def marshaller(self, encode: Marshal | None, decode: Unmarshal | None) -> Builder:
        self._encode = encode
        self._decode = decode
        return self

    def codec(self, codec: Codec) -> Builder:
        if not self._filename:
            self._filename = codec.filename
        return self.marshaller(codec.encode, codec.decode)

    def json(self) -> Builder:
        return self.codec(JSON)

    def create(self) -> ConfigContext:
        return ConfigContext(
            directory=self._directory or DEFAULT_DIRECTORY,
            filename=self._filename or DEFAULT_FILENAME,
            encode=self._encode,
            decode=self._decode,
        )


def build(environ: Mapping[str, str] | None = None) -> Builder:
    """Return a new builder; ``environ`` replaces ``os.environ`` for lookups."""
    return Builder(EnvironmentManager(environ))
