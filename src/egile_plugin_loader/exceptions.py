"""Custom exceptions for Egile Plugin Loader."""

from __future__ import annotations

from pathlib import Path


class EgilePluginError(Exception):
    """Base exception for all Egile plugin loader errors."""

    pass


class ConfigurationError(EgilePluginError):
    """Raised when there is a configuration issue."""

    pass


class StartupError(EgilePluginError):
    """Raised when the plugin root cannot be indexed at startup."""

    def __init__(self, root: Path | str, message: str):
        self.root = Path(root)
        super().__init__(f"[{root}] {message}")


class PluginError(EgilePluginError):
    """Raised when there is an error with a plugin."""

    def __init__(self, plugin_name: str, message: str):
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")


class ManifestError(PluginError):
    """Raised when a plugin manifest is missing or has the wrong shape."""

    pass
