"""Tests for configuration and violation logging."""

import io
import json
import logging

import pytest

from resultcase import ContractViolation, configure_logging, failure, get_logger, get_settings
from resultcase.log import ROOT
from resultcase.settings import ResultcaseSettings


@pytest.fixture
def restore_root_logger() -> object:
    root = logging.getLogger(ROOT)
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_defaults() -> None:
    settings = get_settings()
    assert isinstance(settings, ResultcaseSettings)
    assert settings.debug is False
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "text"
    assert settings.logging.log_violations is True
    assert settings.logging.violation_level == "DEBUG"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESULTCASE_DEBUG", "true")
    monkeypatch.setenv("RESULTCASE_LOG_LEVEL", "warning")
    monkeypatch.setenv("RESULTCASE_LOG_LOG_VIOLATIONS", "false")
    settings = ResultcaseSettings()
    assert settings.debug is True
    assert settings.logging.level == "WARNING"
    assert settings.logging.log_violations is False


def test_violation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger=f"{ROOT}.contract")
    with pytest.raises(ContractViolation):
        failure(None)
    assert "failure(): error must not be None" in caplog.text
    assert [r.levelno for r in caplog.records if r.name.startswith(ROOT)] == [logging.DEBUG]


def test_violation_logging_can_be_disabled(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("RESULTCASE_LOG_LOG_VIOLATIONS", "false")
    caplog.set_level(logging.DEBUG, logger=f"{ROOT}.contract")
    with pytest.raises(ContractViolation):
        failure(None)
    assert not [r for r in caplog.records if r.name.startswith(ROOT)]


def test_get_logger_namespace() -> None:
    assert get_logger().name == ROOT
    assert get_logger("contract").name == f"{ROOT}.contract"


def test_configure_logging_json(restore_root_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging("DEBUG", fmt="json", stream=stream)
    with pytest.raises(ContractViolation):
        failure(None)
    line = json.loads(stream.getvalue().splitlines()[-1])
    assert line["level"] == "debug"
    assert line["logger"] == f"{ROOT}.contract"
    assert "must not be None" in line["event"]


def test_configure_logging_replaces_handler(restore_root_logger: logging.Logger) -> None:
    first = configure_logging(fmt="text", stream=io.StringIO())
    second = configure_logging(fmt="text", stream=io.StringIO())
    assert first not in restore_root_logger.handlers
    assert second in restore_root_logger.handlers


def test_configure_logging_rejects_unknown_format(restore_root_logger: logging.Logger) -> None:
    with pytest.raises(ValueError):
        configure_logging(fmt="xml")
