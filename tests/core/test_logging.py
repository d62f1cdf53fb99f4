"""Tests for winning/core/logging.py - Logging configuration."""

import json
import logging

import pytest

from winning.core.logging import JsonFormatter, configure_logging, env_bool


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("1", True), (" Yes ", True), ("false", False), ("0", False)],
)
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("SOME_FLAG", raw)

    assert env_bool("SOME_FLAG", default=not expected) is expected


def test_env_bool_default(monkeypatch):
    monkeypatch.delenv("SOME_FLAG", raising=False)

    assert env_bool("SOME_FLAG", default=True) is True


def test_json_formatter_includes_known_extras():
    record = logging.LogRecord(
        "winning.account.store", logging.INFO, __file__, 1, "Account %s", ("a@x.com",), None
    )
    record.account_id = "abc"
    record.unrelated = "dropped"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "winning.account.store"
    assert payload["msg"] == "Account a@x.com"
    assert payload["account_id"] == "abc"
    assert "unrelated" not in payload


def test_configure_logging_respects_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_JSON", "true")

    configure_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_JSON", "false")
    configure_logging()
