"""Read and write a single config file through an encode/decode pair."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .codecs import Marshal, Unmarshal
from .constants import DIRECTORY_MODE, FILE_MODE
from .errors import NoDecoderError, NoEncoderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConfigContext:
    """Location and encoding of one config file.

    Contexts are produced by :meth:`appconf.builder.Builder.create` and can be
    reused for any number of reads and writes. No locking is performed:
    concurrent writers to the same path race.
    """

    directory: str
    filename: str
    encode: Marshal | None = None
    decode: Unmarshal | None = None

    @property
    def path(self) -> Path:
        # Plain concatenation; an absolute filename still lands under directory.
        return Path(self.directory + "/" + self.filename)

    def read(self, target: Any = None) -> Any:
        """
        Load the config file into ``target`` and return the populated value.

        A missing file is not an error: ``target`` is returned untouched.
        Other I/O errors and decode errors propagate unchanged.
        """
        path = self.path
        try:
            with path.open("rb") as handle:
                data = handle.read()
        except FileNotFoundError:
            logger.debug("No config file at %s; keeping current value", path)
            return target

        if self.decode is None:
            raise NoDecoderError()
        logger.debug("Read %d bytes from %s", len(data), path)
        return self.decode(data, target)

    def write(self, value: Any) -> None:
        """
        Encode ``value`` and store it, creating the directory when missing.

        The file is truncated, so it holds exactly the new encoding. Encoding
        happens before the file is opened; a failed encode leaves any existing
        file as it was.
        """
        os.makedirs(self.directory, mode=DIRECTORY_MODE, exist_ok=True)

        if self.encode is None:
            raise NoEncoderError()
        data = self.encode(value)

        path = self.path
        file_descriptor = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(file_descriptor, "wb") as handle:
            handle.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)
