"""HTTP inspection server for Egile Plugin Loader."""

from egile_plugin_loader.server.app import PluginServer, create_app

__all__ = ["PluginServer", "create_app"]


def main() -> None:
    """CLI entry point for starting the server."""
    import argparse
    import sys
    from pathlib import Path

    from egile_plugin_loader.config import get_config
    from egile_plugin_loader.exceptions import StartupError
    from egile_plugin_loader.plugins import PluginLoader
    from egile_plugin_loader.utils.logging import setup_logging

    parser = argparse.ArgumentParser(description="Egile Plugin Server")
    parser.add_argument("--host", default=None, help="Host to bind to")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    parser.add_argument("--root", default=None, help="Plugin root directory")
    args = parser.parse_args()

    config = get_config()
    if args.root is not None:
        config = config.model_copy(update={"plugin_root": Path(args.root)})
    setup_logging(level=config.log_level.upper())

    try:
        plugins = PluginLoader(config=config).initialize()
    except StartupError:
        sys.exit(1)

    # uvicorn's reload needs an import string, so it is not offered here
    server = PluginServer(plugins)
    server.serve(
        host=args.host or config.server_host,
        port=args.port or config.server_port,
        log_level=config.log_level.lower(),
    )
