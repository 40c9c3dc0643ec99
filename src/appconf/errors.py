"""Exceptions raised by appconf itself.

I/O and codec failures are not wrapped; they reach the caller as the
original ``OSError`` / ``json.JSONDecodeError`` / ``yaml.YAMLError``.
"""

from __future__ import annotations


class AppConfError(Exception):
    """Base class for appconf errors."""


class NoEncoderError(AppConfError):
    """Raised when writing through a context that has no encode function."""

    def __init__(self) -> None:
        super().__init__("Context has no encode function")


class NoDecoderError(AppConfError):
    """Raised when reading through a context that has no decode function."""

    def __init__(self) -> None:
        super().__init__("Context has no decode function")
