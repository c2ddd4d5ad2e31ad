"""Command-line interface."""

from moss.cli.main import app

__all__ = ["app"]
