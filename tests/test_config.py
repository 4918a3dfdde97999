"""Tests for settings and logging configuration."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from tersargs._internal.log import configure_logging, get_logger
from tersargs.config import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_JSON is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TERSARGS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TERSARGS_LOG_JSON", "true")

    settings = get_settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_JSON is True


def test_get_settings_cached():
    assert get_settings() is get_settings()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("TERSARGS_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
        Settings()


def test_configure_logging_sets_root_level(reset_logging):
    configure_logging(Settings(LOG_LEVEL="DEBUG"))
    assert logging.getLogger().level == logging.DEBUG


def test_json_logging(reset_logging, capsys):
    configure_logging(Settings(LOG_LEVEL="INFO", LOG_JSON=True))

    get_logger("tersargs.tests").info("schema_checked", identifiers=3)

    err = capsys.readouterr().err
    assert '"event": "schema_checked"' in err
    assert '"identifiers": 3' in err


def test_get_logger_is_structlog_bound():
    logger = get_logger("tersargs.tests")
    assert hasattr(logger, "bind")
    assert isinstance(structlog.get_config(), dict)


def test_package_logger_has_null_handler():
    """Library events are swallowed until the host configures logging."""
    handlers = logging.getLogger("tersargs").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_library_warning_not_printed_unconfigured(capsys):
    from tersargs.kernel.schema import compile_schema

    compile_schema("x,x#")
    assert capsys.readouterr().err == ""
