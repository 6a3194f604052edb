from __future__ import annotations

import io
import json
import logging

import pytest

from sitecheck.observability import setup_logging, shutdown_logging


def test_json_format_emits_one_object_per_line() -> None:
    stream = io.StringIO()
    setup_logging(level="DEBUG", log_format="json", stream=stream)

    logging.getLogger("sitecheck.env").info(
        "validated %d variables", 3, extra={"schema_file": "env.toml"}
    )

    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["level"] == "INFO"
    assert event["logger"] == "sitecheck.env"
    assert event["message"] == "validated 3 variables"
    assert event["fields"] == {"schema_file": "env.toml"}
    assert event["timestamp"].endswith("Z")


def test_json_format_redacts_sensitive_fields_and_assignments() -> None:
    stream = io.StringIO()
    setup_logging(log_format="json", stream=stream)

    logging.getLogger("sitecheck.cli").warning(
        "connecting with token=abc123", extra={"api_token": "abc123"}
    )

    output = stream.getvalue()
    assert "abc123" not in output
    event = json.loads(output)
    assert event["message"] == "connecting with token=***REDACTED***"
    assert event["fields"]["api_token"] == "***REDACTED***"


def test_text_format_respects_level_and_redacts() -> None:
    stream = io.StringIO()
    setup_logging(level="warning", stream=stream)
    logger = logging.getLogger("sitecheck.routing")

    logger.info("hidden")
    logger.warning("password=hunter2 rejected")

    assert stream.getvalue() == "WARNING [sitecheck.routing] password=***REDACTED*** rejected\n"


def test_setup_replaces_previous_handler() -> None:
    first = io.StringIO()
    second = io.StringIO()
    setup_logging(stream=first)
    logger = setup_logging(stream=second)

    logging.getLogger("sitecheck").info("once")

    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1
    assert len(logger.handlers) == 1


def test_shutdown_restores_propagation() -> None:
    logger = setup_logging(stream=io.StringIO())
    assert logger.propagate is False

    shutdown_logging()

    assert logger.propagate is True
    assert logger.handlers == []


def test_unknown_level_and_format_are_rejected() -> None:
    with pytest.raises(ValueError, match="unsupported logging level"):
        setup_logging(level="chatty")
    with pytest.raises(ValueError, match="unsupported log format"):
        setup_logging(log_format="xml")


def test_shutdown_tolerates_a_stream_closed_by_its_owner() -> None:
    stream = io.StringIO()
    logger = setup_logging(stream=stream)
    logger.info("before close")
    stream.close()

    shutdown_logging()

    assert logger.propagate is True
    assert logger.handlers == []
