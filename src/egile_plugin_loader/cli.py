"""Command-line entry point for indexing a plugin root."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from egile_plugin_loader.config import get_config
from egile_plugin_loader.exceptions import StartupError
from egile_plugin_loader.plugins.loader import PluginLoader
from egile_plugin_loader.utils.logging import LOG_LEVELS, setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for ``egile-plugins``."""
    parser = argparse.ArgumentParser(
        prog="egile-plugins", description="Index command and middleware plugins"
    )
    parser.add_argument("--root", default=None, help="Plugin root directory")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the loaded plugins as JSON"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Load plugins and print what was found.

    Returns:
        0 on success. Exits the process with status 1 if the plugin root
        cannot be indexed.
    """
    args = build_parser().parse_args(argv)

    config = get_config()
    if args.root is not None:
        config = config.model_copy(update={"plugin_root": Path(args.root)})

    setup_logging(level=args.log_level or config.log_level)

    try:
        commands, middlewares = PluginLoader(config=config).initialize()
    except StartupError:
        # The loader has already reported the fatal diagnostic
        sys.exit(1)

    if args.json:
        summary = {
            "commands": {
                name: {
                    "entry_point": str(frame.entry_point_path),
                    "settings": frame.settings,
                    "localizations": sorted(frame.localized_strings),
                }
                for name, frame in commands.items()
            },
            "middlewares": {
                name: {
                    "entry_point": str(frame.entry_point_path),
                    "settings": frame.settings,
                }
                for name, frame in middlewares.items()
            },
        }
        print(json.dumps(summary, indent=2, sort_keys=True))
    else:
        print(f"Commands: {', '.join(commands.names()) or '(none)'}")
        print(f"Middlewares: {', '.join(middlewares.names()) or '(none)'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
