"""Plugin system for Egile Plugin Loader."""

from egile_plugin_loader.plugins.base import (
    Command,
    CommandFrame,
    FrameRegistry,
    LoadedPlugins,
    Middleware,
    MiddlewareFrame,
    PluginKind,
)
from egile_plugin_loader.plugins.loader import (
    PluginLoader,
    initialize,
    load_entry_point,
    parse_entry_name,
)

__all__ = [
    "Command",
    "CommandFrame",
    "FrameRegistry",
    "LoadedPlugins",
    "Middleware",
    "MiddlewareFrame",
    "PluginKind",
    "PluginLoader",
    "initialize",
    "load_entry_point",
    "parse_entry_name",
]
