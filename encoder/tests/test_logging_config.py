"""
Tests for structured logging setup.
"""

import io
import json
import logging

import pytest

from encoder.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_format_includes_trace_id(monkeypatch, restore_root_logger):
    monkeypatch.setenv("MISSION_ENCODER_LOG_FORMAT", "json")
    monkeypatch.setenv("MISSION_ENCODER_LOG_LEVEL", "INFO")
    stream = io.StringIO()
    setup_logging(stream)

    get_logger("encoder.test", trace_id="replay-1").info("saved")

    record = json.loads(stream.getvalue().strip())
    assert record["message"] == "saved"
    assert record["trace_id"] == "replay-1"
    assert record["level"] == "INFO"


def test_text_format_defaults_trace_id(monkeypatch, restore_root_logger):
    monkeypatch.setenv("MISSION_ENCODER_LOG_FORMAT", "text")
    monkeypatch.setenv("MISSION_ENCODER_LOG_LEVEL", "DEBUG")
    stream = io.StringIO()
    setup_logging(stream)

    logging.getLogger("encoder.test").debug("plain")

    assert "plain (trace_id=N/A)" in stream.getvalue()


def test_level_filters(monkeypatch, restore_root_logger):
    monkeypatch.setenv("MISSION_ENCODER_LOG_FORMAT", "text")
    monkeypatch.setenv("MISSION_ENCODER_LOG_LEVEL", "WARNING")
    stream = io.StringIO()
    setup_logging(stream)

    logging.getLogger("encoder.test").info("hidden")

    assert stream.getvalue() == ""


def test_setup_replaces_previous_handler(monkeypatch, restore_root_logger):
    monkeypatch.setenv("MISSION_ENCODER_LOG_FORMAT", "text")
    monkeypatch.setenv("MISSION_ENCODER_LOG_LEVEL", "bogus")
    first, second = io.StringIO(), io.StringIO()
    setup_logging(first)
    setup_logging(second)

    logging.getLogger("encoder.test").info("once")

    assert first.getvalue() == ""
    assert "once" in second.getvalue()
