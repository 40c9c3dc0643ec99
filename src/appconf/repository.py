"""Load/save adapters on top of a config context."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from .context import ConfigContext

T = TypeVar("T")


class ConfigRepository(Protocol[T]):
    """Abstraction for loading and persisting configuration."""

    def load(self) -> T:
        ...

    def save(self, config: T) -> None:
        ...


class FileConfigRepository(Generic[T]):
    """Stores configuration in the file described by a context.

    ``factory`` produces the default value; a stored file is decoded on top
    of it, so a missing file yields a fresh default.
    """

    def __init__(self, context: ConfigContext, factory: Callable[[], T]) -> None:
        self._context = context
        self._factory = factory

    @property
    def context(self) -> ConfigContext:
        return self._context

    def load(self) -> T:
        return self._context.read(self._factory())

    def save(self, config: T) -> None:
        self._context.write(config)
