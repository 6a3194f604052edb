"""Warning sinks that receive soft validation issues under a subsystem label."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol

from sitecheck.errors import ValidationIssue


class WarningSink(Protocol):
    def warn(self, label: str, issue: ValidationIssue) -> None:
        """Receive one soft issue. Must tolerate interleaved calls from threads."""
        ...


@dataclass(frozen=True, slots=True)
class EmittedWarning:
    label: str
    issue: ValidationIssue


class CollectingWarningSink:
    """Thread-safe in-memory sink; keeps warnings in arrival order."""

    __slots__ = ("_items", "_lock")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[EmittedWarning] = []

    def warn(self, label: str, issue: ValidationIssue) -> None:
        with self._lock:
            self._items.append(EmittedWarning(label=label, issue=issue))

    @property
    def warnings(self) -> tuple[EmittedWarning, ...]:
        with self._lock:
            return tuple(self._items)

    def issues(self) -> tuple[ValidationIssue, ...]:
        return tuple(item.issue for item in self.warnings)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class LoggingWarningSink:
    """Forward warnings to ``<base_logger>.<label>`` at WARNING level."""

    __slots__ = ("_base",)

    def __init__(self, base_logger: str = "sitecheck") -> None:
        self._base = base_logger

    def warn(self, label: str, issue: ValidationIssue) -> None:
        logger = logging.getLogger(f"{self._base}.{label}")
        extra: dict[str, object] = {"issue_kind": str(issue.kind)}
        if issue.location is not None:
            extra["source_file"] = issue.location.file
        logger.warning(issue.message, extra=extra)


__all__ = [
    "CollectingWarningSink",
    "EmittedWarning",
    "LoggingWarningSink",
    "WarningSink",
]
