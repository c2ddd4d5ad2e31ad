"""Tests for the root logger setup used by the CLI."""

import logging

import pytest
from rich.logging import RichHandler
from typer.testing import CliRunner

from moss.cli import app
from moss.logging_setup import LOG_LEVEL_ENV, configure_logging, resolve_level


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler) and handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_configure_logging_installs_one_rich_handler(root_logger):
    first = configure_logging()
    second = configure_logging()

    assert first is second
    assert isinstance(first, RichHandler)
    assert root_logger.handlers.count(first) == 1
    assert root_logger.level == logging.INFO


def test_configure_logging_keeps_other_handlers(root_logger):
    other = logging.NullHandler()
    root_logger.addHandler(other)

    configure_logging()

    assert other in root_logger.handlers
    root_logger.removeHandler(other)


def test_configure_logging_reinstalls_removed_handler(root_logger):
    handler = configure_logging()
    root_logger.removeHandler(handler)

    assert configure_logging() in root_logger.handlers


def test_debug_lowers_the_level(root_logger):
    configure_logging(debug=True)
    assert root_logger.level == logging.DEBUG

    configure_logging()
    assert root_logger.level == logging.INFO


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("WARNING", logging.WARNING),
        ("error", logging.ERROR),
        (" debug ", logging.DEBUG),
        ("chatty", logging.INFO),
    ],
)
def test_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV, value)

    assert resolve_level() == expected


def test_debug_flag_wins_over_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")

    assert resolve_level(debug=True) == logging.DEBUG


def test_cli_debug_flag_sets_debug_level(root_logger, blog_folder):
    result = CliRunner().invoke(app, ["scan", str(blog_folder), "--debug"])

    assert result.exit_code == 0, result.output
    assert root_logger.level == logging.DEBUG
