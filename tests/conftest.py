"""Shared fixtures for building plugin roots on disk."""

import json
from pathlib import Path

import pytest

from egile_plugin_loader.config import LoaderConfig

VALID_ENTRY_POINT = '''
class Handler:
    def execute(self, *args, **kwargs):
        return "ok"


def create():
    return Handler()
'''


def write_plugin(
    root: Path,
    dir_name: str,
    manifest_name: str | None = None,
    manifest: object = None,
    entry_point: str | None = VALID_ENTRY_POINT,
    raw_manifest: str | None = None,
) -> Path:
    """Create a plugin directory under ``root`` and return its path."""
    plugin_dir = root / dir_name
    plugin_dir.mkdir(parents=True)
    if entry_point is not None:
        (plugin_dir / "plugin.py").write_text(entry_point, encoding="utf-8")
    if manifest_name is not None:
        content = raw_manifest if raw_manifest is not None else json.dumps(manifest)
        (plugin_dir / manifest_name).write_text(content, encoding="utf-8")
    return plugin_dir


def write_command(root: Path, name: str, settings=None, localizations=None, **kwargs):
    manifest = {
        "settings": settings if settings is not None else {"cooldown": 5},
        "localizations": localizations
        if localizations is not None
        else {"en": {"reply": "pong"}},
    }
    return write_plugin(root, f"cmd.{name}", "command.json", manifest, **kwargs)


def write_middleware(root: Path, name: str, settings=None, **kwargs):
    manifest = settings if settings is not None else {"priority": 1}
    return write_plugin(root, f"mid.{name}", "middleware.json", manifest, **kwargs)


@pytest.fixture
def plugin_root(tmp_path: Path) -> Path:
    root = tmp_path / "commands"
    root.mkdir()
    return root


@pytest.fixture
def config(plugin_root: Path) -> LoaderConfig:
    return LoaderConfig(plugin_root=plugin_root, _env_file=None)
