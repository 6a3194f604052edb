from __future__ import annotations

import logging

import pytest

from sitecheck.errors import IssueKind, SourceLocation, ValidationIssue
from sitecheck.observability import CollectingWarningSink, LoggingWarningSink


def _issue(message: str = "invalid path param: slug") -> ValidationIssue:
    return ValidationIssue(
        kind=IssueKind.EMPTY_STRING_PARAM,
        message=message,
        location=SourceLocation(file="src/pages/[slug].py"),
    )


def test_collecting_sink_keeps_arrival_order_and_labels() -> None:
    sink = CollectingWarningSink()

    sink.warn("getStaticPaths", _issue("first"))
    sink.warn("router", _issue("second"))

    assert [item.label for item in sink.warnings] == ["getStaticPaths", "router"]
    assert [issue.message for issue in sink.issues()] == ["first", "second"]

    sink.clear()
    assert len(sink) == 0


def test_logging_sink_writes_under_label_logger(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="sitecheck")

    LoggingWarningSink().warn("getStaticPaths", _issue())

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.name == "sitecheck.getStaticPaths"
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "invalid path param: slug"
    assert record.issue_kind == "EmptyStringParam"
    assert record.source_file == "src/pages/[slug].py"
