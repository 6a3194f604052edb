"""
sitecheck — typed issue taxonomy and exceptions.

File: src/sitecheck/errors.py

Purpose
- Define the closed set of issue kinds raised or emitted by the validators.
- Provide the structured issue record and the exceptions that carry it.

Functional requirements
- Every hard issue is raised as ``ValidationError`` carrying one or more issues.
- Soft issues are never raised; they are forwarded to a warning sink.
- Every issue kind has a title and a hint so the user can fix it without
  re-running with extra diagnostics.

Non-functional requirements
- Issue records are immutable and hashable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class IssueKind(StrEnum):
    INVALID_FIELD_SHAPE = "InvalidFieldShape"
    INVALID_ENUM_DEFAULT = "InvalidEnumDefault"
    INVALID_KEY_FORMAT = "InvalidKeyFormat"
    NAMING_POLICY_VIOLATION = "NamingPolicyViolation"
    NOT_A_SEQUENCE = "NotASequence"
    INVALID_ENTRY_SHAPE = "InvalidEntryShape"
    MISSING_PARAMS = "MissingParams"
    MISSING_REQUIRED_EXPORT = "MissingRequiredExport"
    INVALID_PARAM_VALUE_TYPE = "InvalidParamValueType"
    EMPTY_STRING_PARAM = "EmptyStringParam"


HARD_ISSUE_KINDS: Final[frozenset[IssueKind]] = frozenset(
    {
        IssueKind.INVALID_FIELD_SHAPE,
        IssueKind.INVALID_ENUM_DEFAULT,
        IssueKind.INVALID_KEY_FORMAT,
        IssueKind.NAMING_POLICY_VIOLATION,
        IssueKind.NOT_A_SEQUENCE,
        IssueKind.INVALID_ENTRY_SHAPE,
        IssueKind.MISSING_PARAMS,
        IssueKind.MISSING_REQUIRED_EXPORT,
    }
)
SOFT_ISSUE_KINDS: Final[frozenset[IssueKind]] = frozenset(
    {
        IssueKind.INVALID_PARAM_VALUE_TYPE,
        IssueKind.EMPTY_STRING_PARAM,
    }
)


@dataclass(frozen=True, slots=True)
class IssueTemplate:
    """User-facing title and fix hint for one issue kind."""

    title: str
    hint: str


ISSUE_CATALOG: Final[Mapping[IssueKind, IssueTemplate]] = {
    IssueKind.INVALID_FIELD_SHAPE: IssueTemplate(
        title="Invalid field declaration",
        hint=(
            "A field needs a `type` of string, number, boolean or enum, and a "
            "context/access pair of client/public, server/public or server/secret."
        ),
    ),
    IssueKind.INVALID_ENUM_DEFAULT: IssueTemplate(
        title="Invalid enum default",
        hint="Set the enum default to one of its declared values, or remove it.",
    ),
    IssueKind.INVALID_KEY_FORMAT: IssueTemplate(
        title="Invalid variable name",
        hint="A valid variable name can only contain uppercase letters and underscores.",
    ),
    IssueKind.NAMING_POLICY_VIOLATION: IssueTemplate(
        title="Public prefix does not match access",
        hint="Prefix every public variable with the public prefix, and only those.",
    ),
    IssueKind.NOT_A_SEQUENCE: IssueTemplate(
        title="Invalid value returned by get_static_paths",
        hint="get_static_paths must return a list of {'params': {...}} records.",
    ),
    IssueKind.INVALID_ENTRY_SHAPE: IssueTemplate(
        title="Invalid entry returned by get_static_paths",
        hint="Each entry must be a mapping such as {'params': {'slug': 'post'}}.",
    ),
    IssueKind.MISSING_PARAMS: IssueTemplate(
        title="Missing params property on get_static_paths route",
        hint="Every entry returned by get_static_paths needs a non-empty 'params' mapping.",
    ),
    IssueKind.MISSING_REQUIRED_EXPORT: IssueTemplate(
        title="get_static_paths() function required for dynamic routes",
        hint=(
            "Statically generated dynamic routes must export get_static_paths; "
            "otherwise enable server-side rendering for the route."
        ),
    ),
    IssueKind.INVALID_PARAM_VALUE_TYPE: IssueTemplate(
        title="Invalid route parameter value",
        hint="Route parameters must be strings, numbers or None.",
    ),
    IssueKind.EMPTY_STRING_PARAM: IssueTemplate(
        title="Empty route parameter",
        hint="Use None instead of an empty string for an optional parameter.",
    ),
}


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where an issue originated: a route component file or a schema file."""

    file: str
    key: str | None = None

    def render(self) -> str:
        if self.key:
            return f"{self.file} [{self.key}]"
        return self.file


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Single structured validation finding."""

    kind: IssueKind
    message: str
    location: SourceLocation | None = None

    @property
    def is_hard(self) -> bool:
        return self.kind in HARD_ISSUE_KINDS

    @property
    def title(self) -> str:
        return ISSUE_CATALOG[self.kind].title

    @property
    def hint(self) -> str:
        return ISSUE_CATALOG[self.kind].hint

    def render(self) -> str:
        if self.location is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: {self.message} ({self.location.render()})"


class SiteCheckError(Exception):
    """Base class for all typed, operator-facing errors in sitecheck."""


class ValidationError(SiteCheckError, ValueError):
    """Raised when a validator rejects its input with one or more hard issues."""

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        self.issues = tuple(issues)
        if not self.issues:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.render()}" for item in self.issues)
        super().__init__(f"validation failed:\n{rendered}")

    @property
    def kind(self) -> IssueKind | None:
        if not self.issues:
            return None
        return self.issues[0].kind

    @property
    def location(self) -> SourceLocation | None:
        if not self.issues:
            return None
        return self.issues[0].location

    @classmethod
    def single(
        cls,
        kind: IssueKind,
        message: str,
        *,
        location: SourceLocation | None = None,
    ) -> ValidationError:
        if kind not in HARD_ISSUE_KINDS:
            raise ValueError(f"{kind} is a warning kind and cannot be raised")
        return cls((ValidationIssue(kind=kind, message=message, location=location),))


class SchemaLoadError(SiteCheckError):
    """Raised when a schema or static-paths file cannot be read or parsed."""


class SettingsError(SiteCheckError, ValueError):
    """Raised when tool settings are invalid; lists every ``path: message`` issue."""

    def __init__(self, issues: Sequence[tuple[str, str]]) -> None:
        self.issues = tuple(issues)
        rendered = "\n".join(f"- {path}: {message}" for path, message in self.issues)
        super().__init__(f"invalid settings:\n{rendered}" if rendered else "invalid settings")


def format_error(exc: BaseException) -> str:
    """Return a short, uniform operator-facing message like 'ValidationError: detail'."""

    name = exc.__class__.__name__
    message = str(exc).strip()
    return f"{name}: {message}" if message else name


__all__ = [
    "HARD_ISSUE_KINDS",
    "ISSUE_CATALOG",
    "IssueKind",
    "IssueTemplate",
    "SOFT_ISSUE_KINDS",
    "SchemaLoadError",
    "SettingsError",
    "SiteCheckError",
    "SourceLocation",
    "ValidationError",
    "ValidationIssue",
    "format_error",
]
