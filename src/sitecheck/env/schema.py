"""
sitecheck — env schema composition and naming policy validation.

File: src/sitecheck/env/schema.py

Purpose
- Compose per-key field metadata and field types into a validated ``EnvSchema``.
- Enforce the public-prefix naming policy across the whole schema.

Functional requirements
- Per-field issues (key format, metadata, type shape, enum default) fail fast:
  the first one is raised on its own.
- Naming policy violations are collected across every key and raised together.
- Re-validating an accepted schema yields an equal schema.

Non-functional requirements
- Pure and synchronous; no shared mutable state.
- Deterministic dumps with secret defaults redacted.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from sitecheck.constants import ENV_KEY_PATTERN, PUBLIC_PREFIX, REDACTED_PLACEHOLDER
from sitecheck.env.field_types import FieldType, field_type_declaration, parse_field_type
from sitecheck.env.metadata import (
    METADATA_KEYS,
    FieldAccess,
    FieldContext,
    FieldMetadata,
    parse_field_metadata,
)
from sitecheck.errors import IssueKind, SourceLocation, ValidationError, ValidationIssue


@dataclass(frozen=True, slots=True)
class EnvField:
    """One declared variable: visibility metadata combined with a field type."""

    metadata: FieldMetadata
    field_type: FieldType

    @property
    def context(self) -> FieldContext:
        return self.metadata.context

    @property
    def access(self) -> FieldAccess:
        return self.metadata.access

    @property
    def optional(self) -> bool:
        return self.field_type.optional

    @property
    def default(self) -> object:
        return self.field_type.default

    def to_declaration(self) -> dict[str, Any]:
        declaration = self.metadata.to_declaration()
        declaration.update(field_type_declaration(self.field_type))
        return declaration


class EnvSchema(Mapping[str, EnvField]):
    """Immutable mapping of validated variable names to fields."""

    __slots__ = ("_fields", "_public_prefix")

    def __init__(self, fields: Mapping[str, EnvField], *, public_prefix: str) -> None:
        self._fields = dict(fields)
        self._public_prefix = public_prefix

    @property
    def public_prefix(self) -> str:
        return self._public_prefix

    def __getitem__(self, key: str) -> EnvField:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvSchema):
            return NotImplemented
        return self._public_prefix == other._public_prefix and self._fields == other._fields

    def __hash__(self) -> int:
        return hash((self._public_prefix, tuple(self._fields.items())))

    def __repr__(self) -> str:
        return f"EnvSchema({sorted(self._fields)!r}, public_prefix={self._public_prefix!r})"

    def public_keys(self) -> tuple[str, ...]:
        return tuple(key for key, item in self._fields.items() if item.metadata.is_public)

    def secret_keys(self) -> tuple[str, ...]:
        return tuple(key for key, item in self._fields.items() if not item.metadata.is_public)

    def client_keys(self) -> tuple[str, ...]:
        return tuple(
            key for key, item in self._fields.items() if item.context is FieldContext.CLIENT
        )

    def to_declarations(self) -> dict[str, dict[str, Any]]:
        return {key: item.to_declaration() for key, item in self._fields.items()}


class _NamingPolicyCollector:
    """Accumulates naming policy violations; raises once when asked."""

    __slots__ = ("_items", "_location_file")

    def __init__(self, location_file: str | None) -> None:
        self._items: list[ValidationIssue] = []
        self._location_file = location_file

    def add(self, key: str, message: str) -> None:
        location = None
        if self._location_file is not None:
            location = SourceLocation(file=self._location_file, key=key)
        self._items.append(
            ValidationIssue(
                kind=IssueKind.NAMING_POLICY_VIOLATION,
                message=f"{key}: {message}",
                location=location,
            )
        )

    def items(self) -> tuple[ValidationIssue, ...]:
        return tuple(self._items)

    @property
    def has_issues(self) -> bool:
        return bool(self._items)

    def raise_if_any(self) -> None:
        if self._items:
            raise ValidationError(self._items)


def validate_env_schema(
    declarations: Mapping[str, object] | object,
    *,
    public_prefix: str = PUBLIC_PREFIX,
    source_file: str | None = None,
) -> EnvSchema:
    """Validate raw field declarations and return the composed schema.

    ``declarations`` maps variable names to raw declaration mappings; an already
    validated ``EnvSchema`` (or ``EnvField`` values) is accepted as well. Raises
    ``ValidationError`` with the first per-field issue, or with every naming
    policy violation once all fields are individually valid.
    """

    if not isinstance(public_prefix, str) or not public_prefix:
        raise ValueError("public_prefix must be a non-empty string")

    root_location = SourceLocation(file=source_file) if source_file is not None else None
    if not isinstance(declarations, Mapping):
        raise ValidationError.single(
            IssueKind.INVALID_FIELD_SHAPE,
            "env schema must be a mapping of variable names to declarations, "
            f"got {type(declarations).__name__}",
            location=root_location,
        )

    fields: dict[str, EnvField] = {}
    for key, raw in declarations.items():
        location = _field_location(source_file, key)
        parsed_key = _parse_key(key, location)
        fields[parsed_key] = _parse_field(raw, parsed_key, location)

    violations = _NamingPolicyCollector(source_file)
    for key, item in fields.items():
        _check_naming_policy(key, item, public_prefix, violations)
    violations.raise_if_any()

    return EnvSchema(fields, public_prefix=public_prefix)


def naming_policy_issues(
    schema: Mapping[str, EnvField],
    *,
    public_prefix: str = PUBLIC_PREFIX,
) -> tuple[ValidationIssue, ...]:
    """Return every naming policy violation without raising."""

    violations = _NamingPolicyCollector(None)
    for key, item in schema.items():
        _check_naming_policy(key, item, public_prefix, violations)
    return violations.items()


def dump_schema(schema: EnvSchema) -> str:
    """Return a deterministic JSON dump; defaults of secret fields are redacted."""

    payload: dict[str, object] = {}
    for key, declaration in schema.to_declarations().items():
        if declaration.get("access") == FieldAccess.SECRET and "default" in declaration:
            declaration["default"] = REDACTED_PLACEHOLDER
        payload[key] = declaration
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _parse_key(key: object, location: SourceLocation | None) -> str:
    if not isinstance(key, str) or not ENV_KEY_PATTERN.fullmatch(key):
        raise ValidationError.single(
            IssueKind.INVALID_KEY_FORMAT,
            f"{key!r} is not a valid variable name; a valid variable name can only "
            "contain uppercase letters and underscores",
            location=location,
        )
    return key


def _parse_field(raw: object, key: str, location: SourceLocation | None) -> EnvField:
    if isinstance(raw, EnvField):
        raw = raw.to_declaration()
    if not isinstance(raw, Mapping):
        raise ValidationError.single(
            IssueKind.INVALID_FIELD_SHAPE,
            f"{key}: expected a field declaration object, got {type(raw).__name__}",
            location=location,
        )

    metadata = parse_field_metadata(raw, key=key, location=location)
    field_type = parse_field_type(raw, key=key, ignored_keys=METADATA_KEYS, location=location)
    return EnvField(metadata=metadata, field_type=field_type)


def _check_naming_policy(
    key: str,
    item: EnvField,
    public_prefix: str,
    violations: _NamingPolicyCollector,
) -> None:
    prefixed = key.startswith(public_prefix)
    if prefixed and not item.metadata.is_public:
        violations.add(
            key,
            f'An environment variable whose name is prefixed by "{public_prefix}" '
            "must be public.",
        )
    if item.metadata.is_public and not prefixed:
        violations.add(
            key,
            "An environment variable that is public must have a name prefixed by "
            f'"{public_prefix}".',
        )


def _field_location(source_file: str | None, key: object) -> SourceLocation | None:
    if source_file is None:
        return None
    return SourceLocation(file=source_file, key=str(key))


__all__ = [
    "EnvField",
    "EnvSchema",
    "dump_schema",
    "naming_policy_issues",
    "validate_env_schema",
]
