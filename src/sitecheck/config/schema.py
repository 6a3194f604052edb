"""
sitecheck — tool settings schema and validation.

File: src/sitecheck/config/schema.py

Purpose
- Define settings defaults and strict validation rules for ``sitecheck.toml``.

Functional requirements
- Validate settings payloads and return structured issues (path + message).
- Reject unknown keys explicitly.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, TypedDict

from sitecheck.constants import ENV_KEY_PATTERN, PUBLIC_PREFIX
from sitecheck.errors import SettingsError
from sitecheck.observability.logging import LOG_FORMATS

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")


class EnvSettings(TypedDict):
    public_prefix: str


class LoggingSettings(TypedDict):
    level: str
    format: str


class RoutingSettings(TypedDict):
    ssr: bool


class SettingsPayload(TypedDict):
    env: EnvSettings
    logging: LoggingSettings
    routing: RoutingSettings


DEFAULT_SETTINGS: Final[SettingsPayload] = {
    "env": {"public_prefix": PUBLIC_PREFIX},
    "logging": {"level": "INFO", "format": "text"},
    "routing": {"ssr": False},
}


@dataclass(frozen=True, slots=True)
class SiteCheckSettings:
    """Effective, validated tool settings."""

    public_prefix: str = PUBLIC_PREFIX
    log_level: str = "INFO"
    log_format: str = "text"
    ssr: bool = False

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> SiteCheckSettings:
        validated = assert_valid_settings(payload)
        return cls(
            public_prefix=validated["env"]["public_prefix"],
            log_level=validated["logging"]["level"],
            log_format=validated["logging"]["format"],
            ssr=validated["routing"]["ssr"],
        )


@dataclass(frozen=True, slots=True)
class SettingsValidationIssue:
    path: str
    message: str


@dataclass(frozen=True, slots=True)
class SettingsValidationResult:
    settings: dict[str, Any] | None
    issues: tuple[SettingsValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return self.settings is not None and not self.issues


class _IssueCollector:
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[SettingsValidationIssue] = []

    def add(self, path: str, message: str) -> None:
        self._items.append(SettingsValidationIssue(path=path, message=message))

    def items(self) -> tuple[SettingsValidationIssue, ...]:
        return tuple(self._items)

    @property
    def has_issues(self) -> bool:
        return bool(self._items)


def default_settings() -> dict[str, Any]:
    """Return a deep copy of the built-in defaults."""

    return copy.deepcopy(dict(DEFAULT_SETTINGS))


def validate_settings(payload: Mapping[str, object] | object) -> SettingsValidationResult:
    """Validate a complete settings payload and collect every issue."""

    issues = _IssueCollector()
    if not isinstance(payload, Mapping):
        issues.add("<root>", f"expected object, got {type(payload).__name__}")
        return SettingsValidationResult(settings=None, issues=issues.items())

    _reject_unknown_keys(payload, {"env", "logging", "routing"}, "", issues)
    out: dict[str, Any] = {}

    env = _section(payload, "env", {"public_prefix"}, issues)
    if env is not None:
        prefix = _as_str(env.get("public_prefix"), "env.public_prefix", issues)
        if prefix is not None and not ENV_KEY_PATTERN.fullmatch(prefix):
            issues.add(
                "env.public_prefix",
                "must contain only uppercase letters and underscores (example: PUBLIC_)",
            )
        out["env"] = {"public_prefix": prefix}

    logging_section = _section(payload, "logging", {"level", "format"}, issues)
    if logging_section is not None:
        out["logging"] = {
            "level": _as_enum(logging_section.get("level"), "logging.level", issues, LOG_LEVELS),
            "format": _as_enum(
                logging_section.get("format"), "logging.format", issues, LOG_FORMATS
            ),
        }

    routing = _section(payload, "routing", {"ssr"}, issues)
    if routing is not None:
        ssr = routing.get("ssr")
        if not isinstance(ssr, bool):
            issues.add("routing.ssr", f"expected boolean, got {type(ssr).__name__}")
        out["routing"] = {"ssr": ssr}

    if issues.has_issues:
        return SettingsValidationResult(settings=None, issues=issues.items())
    return SettingsValidationResult(settings=out, issues=())


def assert_valid_settings(payload: Mapping[str, object] | object) -> dict[str, Any]:
    """Validate settings and raise ``SettingsError`` listing every issue."""

    result = validate_settings(payload)
    if result.settings is None:
        raise SettingsError([(item.path, item.message) for item in result.issues])
    return result.settings


def _section(
    payload: Mapping[str, object],
    key: str,
    allowed: set[str],
    issues: _IssueCollector,
) -> Mapping[str, object] | None:
    raw = payload.get(key)
    if raw is None:
        issues.add(key, "missing required field")
        return None
    if not isinstance(raw, Mapping):
        issues.add(key, f"expected object, got {type(raw).__name__}")
        return None
    _reject_unknown_keys(raw, allowed, key, issues)
    return raw


def _as_str(value: object, path: str, issues: _IssueCollector) -> str | None:
    if not isinstance(value, str):
        issues.add(path, f"expected string, got {type(value).__name__}")
        return None
    parsed = value.strip()
    if not parsed:
        issues.add(path, "must not be empty")
        return None
    return parsed


def _as_enum(
    value: object,
    path: str,
    issues: _IssueCollector,
    allowed_values: tuple[str, ...],
) -> str | None:
    parsed = _as_str(value, path, issues)
    if parsed is None:
        return None
    if path == "logging.level":
        parsed = parsed.upper()
    if parsed not in allowed_values:
        expected = ", ".join(allowed_values)
        issues.add(path, f"invalid value {parsed!r}; expected one of: {expected}")
        return None
    return parsed


def _reject_unknown_keys(
    payload: Mapping[str, object],
    allowed: set[str],
    path: str,
    issues: _IssueCollector,
) -> None:
    for key in sorted(str(item) for item in payload):
        if key not in allowed:
            issues.add(f"{path}.{key}" if path else key, "unknown field")


__all__ = [
    "DEFAULT_SETTINGS",
    "LOG_LEVELS",
    "SettingsPayload",
    "SettingsValidationIssue",
    "SettingsValidationResult",
    "SiteCheckSettings",
    "assert_valid_settings",
    "default_settings",
    "validate_settings",
]
