"""Utilities for Egile Plugin Loader."""

from egile_plugin_loader.utils.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
