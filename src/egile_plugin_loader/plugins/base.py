"""Plugin contract, frames and registries for Egile Plugin Loader."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Generic, NamedTuple, Protocol, TypeVar, runtime_checkable


class PluginKind(str, Enum):
    """The two kinds of plugin directory the loader recognizes."""

    COMMAND = "command"
    MIDDLEWARE = "middleware"


@runtime_checkable
class Executable(Protocol):
    """Anything whose ``execute`` member can be called."""

    execute: Any


def is_executable(obj: Any) -> bool:
    """Return True if ``obj`` exposes a callable ``execute`` member."""
    return callable(getattr(obj, "execute", None))


class Command(ABC):
    """
    Optional base class for command plugins.

    A command directory's entry point only has to expose a factory returning
    something with a callable ``execute``; subclassing is a convenience.

    Example:
        ```python
        # commands/cmd.ping/plugin.py
        from egile_plugin_loader.plugins import Command

        class Ping(Command):
            def execute(self, message, *args, **kwargs):
                return "pong"

        def create():
            return Ping()
        ```
    """

    @abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> Any:
        """
        Run the command.

        Args:
            *args: Arguments supplied by the dispatcher.
            **kwargs: Additional context.

        Returns:
            Whatever the dispatcher expects from a command.
        """
        pass


class Middleware(ABC):
    """Optional base class for middleware plugins."""

    @abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> Any:
        """Run the middleware against a message before commands see it."""
        pass


@dataclass(frozen=True)
class CommandFrame:
    """A validated command plugin."""

    entry_point_path: Path
    settings: dict[str, Any] = field(default_factory=dict)
    localized_strings: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not str(self.entry_point_path):
            raise ValueError("entry_point_path must not be empty")


@dataclass(frozen=True)
class MiddlewareFrame:
    """A validated middleware plugin."""

    entry_point_path: Path
    settings: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not str(self.entry_point_path):
            raise ValueError("entry_point_path must not be empty")


F = TypeVar("F", CommandFrame, MiddlewareFrame)


class FrameRegistry(Mapping[str, F], Generic[F]):
    """
    Read-only, name-keyed mapping of loaded frames of one kind.

    Built once by the loader and handed to the caller; there is no way to
    add or remove frames afterward.
    """

    def __init__(self, frames: Mapping[str, F] | None = None):
        self._frames: Mapping[str, F] = MappingProxyType(dict(frames or {}))

    def __getitem__(self, name: str) -> F:
        return self._frames[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._frames)!r})"

    def names(self) -> list[str]:
        """List the registered plugin names, sorted."""
        return sorted(self._frames)

    def list_all(self) -> list[F]:
        """List all registered frames."""
        return list(self._frames.values())


class LoadedPlugins(NamedTuple):
    """Result of a plugin scan: both registries, unpackable as a pair."""

    commands: FrameRegistry[CommandFrame]
    middlewares: FrameRegistry[MiddlewareFrame]
