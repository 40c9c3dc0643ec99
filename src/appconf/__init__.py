"""Read and write application config files through pluggable encodings."""

from __future__ import annotations

import logging

from . import codecs
from .builder import Builder, build
from .codecs import Codec
from .context import ConfigContext
from .errors import AppConfError, NoDecoderError, NoEncoderError
from .repository import ConfigRepository, FileConfigRepository

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AppConfError",
    "Builder",
    "Codec",
    "ConfigContext",
    "ConfigRepository",
    "FileConfigRepository",
    "NoDecoderError",
    "NoEncoderError",
    "build",
    "codecs",
]
