"""Manifest schemas for command and middleware plugins."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel, ValidationError

from egile_plugin_loader.exceptions import ManifestError


class CommandManifest(BaseModel):
    """Shape of a command plugin's ``command.json``."""

    model_config = ConfigDict(extra="allow")

    settings: dict[str, Any]
    localizations: dict[str, Any]


class MiddlewareManifest(RootModel[dict[str, Any]]):
    """Shape of a middleware plugin's ``middleware.json``: any JSON object."""

    pass


def _read(plugin_name: str, path: Path) -> str:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ManifestError(plugin_name, f"Cannot read {path.name}: {e}") from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ManifestError(plugin_name, f"{path.name} is not UTF-8: {e}") from e


def load_command_manifest(plugin_name: str, path: Path) -> CommandManifest:
    """
    Parse and validate a command manifest.

    Args:
        plugin_name: Name of the plugin, used in error messages.
        path: Path to the manifest file.

    Returns:
        The validated manifest.

    Raises:
        ManifestError: If the file cannot be read, is not valid JSON, or
            lacks object-valued ``settings`` and ``localizations`` fields.
    """
    try:
        return CommandManifest.model_validate_json(_read(plugin_name, path))
    except ValidationError as e:
        raise ManifestError(plugin_name, f"Invalid {path.name}: {e}") from e


def load_middleware_manifest(plugin_name: str, path: Path) -> MiddlewareManifest:
    """
    Parse and validate a middleware manifest.

    Raises:
        ManifestError: If the file cannot be read or its top-level value is
            not a JSON object.
    """
    try:
        return MiddlewareManifest.model_validate_json(_read(plugin_name, path))
    except ValidationError as e:
        raise ManifestError(plugin_name, f"Invalid {path.name}: {e}") from e
