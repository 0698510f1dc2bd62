"""Diagnostics facility used by the plugin loader to report progress."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from egile_plugin_loader.utils.logging import get_logger


@runtime_checkable
class Debug(Protocol):
    """
    Diagnostics collaborator expected by the plugin loader.

    ``log`` receives non-fatal progress notices. ``print`` receives summary
    lines and, with ``is_fatal`` set, the single diagnostic emitted before
    the host gives up.
    """

    def log(self, message: str, tag: str) -> None: ...

    def print(
        self,
        message: str,
        tag: str,
        is_fatal: bool = False,
        error: BaseException | None = None,
    ) -> None: ...


class LoggingDebug:
    """
    Default ``Debug`` implementation backed by the standard logging module.

    Example:
        ```python
        from egile_plugin_loader.debug import LoggingDebug

        debug = LoggingDebug()
        debug.log("Command (ping) loaded.", "COMMANDS")
        debug.print("1 commands loaded.", "COMMANDS", False)
        ```
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or get_logger("debug")

    def log(self, message: str, tag: str) -> None:
        self.logger.info(message, extra={"tag": tag})

    def print(
        self,
        message: str,
        tag: str,
        is_fatal: bool = False,
        error: BaseException | None = None,
    ) -> None:
        if is_fatal:
            self.logger.critical(message, exc_info=error, extra={"tag": tag})
        else:
            self.logger.info(message, extra={"tag": tag})
