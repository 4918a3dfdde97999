"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed tersargs package.
"""

import logging
import sys

import pytest
import structlog

from tersargs import cli
from tersargs.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from the caller's TERSARGS_* environment and settings cache."""
    for name in ("TERSARGS_LOG_LEVEL", "TERSARGS_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_logging():
    """Undo configure_logging() so later tests do not write to a closed capture stream."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def run_cli(monkeypatch, reset_logging):
    """Run the CLI with argv and return its exit code."""
    def _run(args):
        monkeypatch.setattr(sys, "argv", ["tersargs"] + args)
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        return excinfo.value.code
    return _run
