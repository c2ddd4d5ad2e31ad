"""Logging for the moss command line: one Rich handler on the root logger."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["LOG_LEVEL_ENV", "configure_logging", "resolve_level"]

LOG_LEVEL_ENV = "MOSS_LOG_LEVEL"

_handler: RichHandler | None = None


def resolve_level(*, debug: bool = False) -> int:
    """``DEBUG`` under ``--debug``, else the level named by ``MOSS_LOG_LEVEL`` (default ``INFO``)."""
    if debug:
        return logging.DEBUG
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, debug: bool = False) -> RichHandler:
    """Send log records to stderr through Rich.

    Safe to call once per command: the handler is installed on the first call
    and later calls only adjust the level. Handlers installed by others (pytest's
    capture handler, for one) are left alone.
    """
    global _handler  # noqa: PLW0603
    root = logging.getLogger()
    if _handler is None or _handler not in root.handlers:
        _handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False, rich_tracebacks=True)
        _handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(_handler)
    root.setLevel(resolve_level(debug=debug))
    return _handler
