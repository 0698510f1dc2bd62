"""Plugin discovery and loading for Egile Plugin Loader."""

from __future__ import annotations

import importlib.util
import logging
import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from egile_plugin_loader.config import LoaderConfig, get_config
from egile_plugin_loader.debug import LoggingDebug
from egile_plugin_loader.exceptions import (
    ConfigurationError,
    PluginError,
    StartupError,
)
from egile_plugin_loader.plugins.base import (
    CommandFrame,
    FrameRegistry,
    LoadedPlugins,
    MiddlewareFrame,
    PluginKind,
    is_executable,
)
from egile_plugin_loader.plugins.manifest import (
    load_command_manifest,
    load_middleware_manifest,
)

if TYPE_CHECKING:
    from egile_plugin_loader.debug import Debug

logger = logging.getLogger(__name__)

# Tag used for every diagnostic the loader emits
LOG_TAG = "COMMANDS"
FATAL_TAG = "COMMANDS CRITICAL"

# Prefix for the synthetic module names entry points are imported under
MODULE_PREFIX = "_egile_plugin"


def parse_entry_name(
    dir_name: str, command_marker: str = "cmd", middleware_marker: str = "mid"
) -> tuple[PluginKind, str] | None:
    """
    Classify a plugin root entry by its ``<marker>.<name>`` directory name.

    Returns:
        ``(kind, name)`` for a recognized entry, None for anything else.
    """
    parts = dir_name.split(".")
    if len(parts) != 2 or not parts[1]:
        return None

    marker, name = parts
    if marker == command_marker:
        return PluginKind.COMMAND, name
    if marker == middleware_marker:
        return PluginKind.MIDDLEWARE, name
    return None


def load_entry_point(name: str, path: Path, factory_name: str = "create") -> Any:
    """
    Import a plugin entry point by path and build its instance.

    Args:
        name: Plugin name, used for the module name and error messages.
        path: Path to the entry point file.
        factory_name: Module attribute holding the zero-argument factory.

    Returns:
        The object returned by the factory.

    Raises:
        PluginError: If the module cannot be imported, has no callable
            factory, the factory fails, or the result has no callable
            ``execute``.
    """
    safe_name = re.sub(r"\W", "_", name)
    module_name = f"{MODULE_PREFIX}_{safe_name}_{abs(hash(path.resolve()))}"

    try:
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise PluginError(name, f"Cannot import entry point {path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise

        factory = getattr(module, factory_name, None)
        if not callable(factory):
            raise PluginError(
                name, f"Entry point has no callable '{factory_name}' factory"
            )

        instance = factory()
        executable = is_executable(instance)
    except PluginError:
        raise
    except (Exception, SystemExit) as e:
        # sys.exit() in plugin code is a load failure, not a host exit
        raise PluginError(name, f"Failed to load entry point: {e!r}") from e

    if not executable:
        raise PluginError(name, "Factory result has no callable 'execute'")

    return instance


class PluginLoader:
    """
    Scans a plugin root and builds the command and middleware registries.

    Directories named ``<command marker>.<name>`` become commands, and
    ``<middleware marker>.<name>`` become middlewares. Each must carry an
    entry point exposing a zero-argument factory plus a JSON manifest.
    Malformed candidates are skipped; only an unreadable plugin root is
    fatal.

    Example:
        ```python
        from egile_plugin_loader.plugins import PluginLoader

        commands, middlewares = PluginLoader().initialize()
        ping = commands["ping"]
        print(ping.settings, ping.localized_strings)
        ```
    """

    def __init__(
        self,
        config: LoaderConfig | None = None,
        debug: Debug | None = None,
        root: Path | str | None = None,
    ):
        """
        Initialize the loader.

        Args:
            config: Loader configuration. Uses the global config if None.
            debug: Diagnostics facility. Uses ``LoggingDebug`` if None.
            root: Plugin root override. Uses ``config.plugin_root`` if None.

        Raises:
            ConfigurationError: If both markers are the same.
        """
        self.config = config or get_config()
        self.debug = debug or LoggingDebug()
        self.root = Path(root) if root is not None else self.config.plugin_root

        if self.config.command_marker == self.config.middleware_marker:
            raise ConfigurationError(
                "command_marker and middleware_marker must differ"
            )

    def _entry_point(self, dir_name: str) -> Path:
        return self.root / dir_name / self.config.entry_point_filename

    def load_command(self, dir_name: str) -> CommandFrame | None:
        """
        Load a command from a plugin directory.

        Args:
            dir_name: Directory name inside the plugin root.

        Returns:
            The command frame, or None if the directory is not a valid
            command.
        """
        entry_point = self._entry_point(dir_name)
        manifest_path = self.root / dir_name / self.config.command_manifest_filename

        if not entry_point.is_file() or not manifest_path.is_file():
            logger.debug(f"Skipping '{dir_name}': entry point or manifest missing")
            return None

        try:
            load_entry_point(dir_name, entry_point, self.config.factory_name)
            manifest = load_command_manifest(dir_name, manifest_path)
        except PluginError as e:
            logger.debug(f"Skipping '{dir_name}': {e}")
            return None

        return CommandFrame(
            entry_point_path=entry_point,
            settings=manifest.settings,
            localized_strings=manifest.localizations,
        )

    def load_middleware(self, dir_name: str) -> MiddlewareFrame | None:
        """
        Load a middleware from a plugin directory.

        Args:
            dir_name: Directory name inside the plugin root.

        Returns:
            The middleware frame, or None if the directory is not a valid
            middleware.
        """
        entry_point = self._entry_point(dir_name)
        manifest_path = (
            self.root / dir_name / self.config.middleware_manifest_filename
        )

        if not entry_point.is_file() or not manifest_path.is_file():
            logger.debug(f"Skipping '{dir_name}': entry point or manifest missing")
            return None

        try:
            load_entry_point(dir_name, entry_point, self.config.factory_name)
            manifest = load_middleware_manifest(dir_name, manifest_path)
        except PluginError as e:
            logger.debug(f"Skipping '{dir_name}': {e}")
            return None

        return MiddlewareFrame(entry_point_path=entry_point, settings=manifest.root)

    def _list_directories(self) -> list[str]:
        try:
            return sorted(
                entry.name for entry in self.root.iterdir() if entry.is_dir()
            )
        except OSError as e:
            self.debug.print(
                "Indexing commands failed. The process will now exit.",
                FATAL_TAG,
                True,
                e,
            )
            raise StartupError(self.root, f"Cannot index plugin root: {e}") from e

    def initialize(self) -> LoadedPlugins:
        """
        Load every command and middleware in the plugin root.

        Returns:
            The command and middleware registries.

        Raises:
            StartupError: If the plugin root cannot be enumerated. A fatal
                diagnostic has already been reported when this is raised.
        """
        commands: dict[str, CommandFrame] = {}
        middlewares: dict[str, MiddlewareFrame] = {}

        for dir_name in self._list_directories():
            parsed = parse_entry_name(
                dir_name, self.config.command_marker, self.config.middleware_marker
            )
            if parsed is None:
                continue

            kind, name = parsed
            if kind is PluginKind.COMMAND:
                frame = self.load_command(dir_name)
                if frame is None:
                    continue
                if name in commands:
                    logger.warning(f"Command '{name}' loaded twice, replacing")
                commands[name] = frame
                self.debug.log(f"Command ({name}) loaded.", LOG_TAG)
            else:
                frame = self.load_middleware(dir_name)
                if frame is None:
                    continue
                if name in middlewares:
                    logger.warning(f"Middleware '{name}' loaded twice, replacing")
                middlewares[name] = frame
                self.debug.log(f"Middleware ({name}) loaded.", LOG_TAG)

        self.debug.print(f"{len(commands)} commands loaded.", LOG_TAG, False)
        self.debug.print(f"{len(middlewares)} middlewares loaded.", LOG_TAG, False)

        return LoadedPlugins(
            commands=FrameRegistry(commands),
            middlewares=FrameRegistry(middlewares),
        )


def initialize(
    config: LoaderConfig | None = None, debug: Debug | None = None
) -> LoadedPlugins:
    """Load plugins from the configured plugin root with a fresh loader."""
    return PluginLoader(config=config, debug=debug).initialize()
