"""Public observability primitives: logging setup and warning sinks."""

from sitecheck.observability.logging import (
    LOG_FORMATS,
    JsonLineFormatter,
    RedactingTextFormatter,
    setup_logging,
    shutdown_logging,
)
from sitecheck.observability.sinks import (
    CollectingWarningSink,
    EmittedWarning,
    LoggingWarningSink,
    WarningSink,
)

__all__ = [
    "CollectingWarningSink",
    "EmittedWarning",
    "JsonLineFormatter",
    "LOG_FORMATS",
    "LoggingWarningSink",
    "RedactingTextFormatter",
    "WarningSink",
    "setup_logging",
    "shutdown_logging",
]
