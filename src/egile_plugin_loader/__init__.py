"""Egile Plugin Loader - command and middleware discovery for bots and CLIs."""

from egile_plugin_loader.config import LoaderConfig
from egile_plugin_loader.plugins import LoadedPlugins, PluginLoader, initialize

__version__ = "0.1.0"
__all__ = ["LoadedPlugins", "LoaderConfig", "PluginLoader", "initialize", "__version__"]
