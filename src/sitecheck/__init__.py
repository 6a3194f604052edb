"""
sitecheck — declarative validation for env variable schemas and static route paths.

File: src/sitecheck/__init__.py

Purpose
- Package root. Re-exports the validation entrypoints and the issue taxonomy.

Functional requirements
- Must not have side effects at import time (no settings loading, no logging init).
"""

from sitecheck.env import EnvField, EnvSchema, env_field, validate_env_schema
from sitecheck.errors import (
    IssueKind,
    SiteCheckError,
    SourceLocation,
    ValidationError,
    ValidationIssue,
)
from sitecheck.observability import CollectingWarningSink, LoggingWarningSink, WarningSink
from sitecheck.routing import (
    RouteData,
    validate_dynamic_route_module,
    validate_static_paths_result,
)

__version__ = "0.1.0"

__all__ = [
    "CollectingWarningSink",
    "EnvField",
    "EnvSchema",
    "IssueKind",
    "LoggingWarningSink",
    "RouteData",
    "SiteCheckError",
    "SourceLocation",
    "ValidationError",
    "ValidationIssue",
    "WarningSink",
    "__version__",
    "env_field",
    "validate_dynamic_route_module",
    "validate_env_schema",
    "validate_static_paths_result",
]
