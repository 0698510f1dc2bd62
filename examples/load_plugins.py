"""
Sample Egile Plugin Loader Application

Loads the example plugin tree next to this file and prints what was found,
then serves the inspection API.

Usage:
    python examples/load_plugins.py

Or pointing at another plugin root:
    EGILE_PLUGINS_PLUGIN_ROOT=/path/to/commands python examples/load_plugins.py
"""

import os
import sys
from pathlib import Path

from egile_plugin_loader import LoaderConfig, PluginLoader
from egile_plugin_loader.exceptions import StartupError
from egile_plugin_loader.server import PluginServer
from egile_plugin_loader.utils.logging import setup_logging


def main() -> None:
    setup_logging(level="INFO")

    root = os.environ.get(
        "EGILE_PLUGINS_PLUGIN_ROOT", str(Path(__file__).parent / "commands")
    )
    config = LoaderConfig(plugin_root=root)

    try:
        plugins = PluginLoader(config=config).initialize()
    except StartupError:
        sys.exit(1)

    for name, frame in plugins.commands.items():
        print(f"cmd {name}: settings={frame.settings} languages={sorted(frame.localized_strings)}")
    for name, frame in plugins.middlewares.items():
        print(f"mid {name}: settings={frame.settings}")

    server = PluginServer(plugins)
    server.serve(host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
