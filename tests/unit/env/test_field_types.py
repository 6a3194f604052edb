"""
sitecheck — unit tests for env field type shapes

File: tests/unit/env/test_field_types.py

Purpose
- Validate tag dispatch, default type checks, and enum refinement ordering.

What this test file should cover
- Unknown tags and cross-shape inputs are shape errors.
- No coercion between types.
- Enum default membership is reported separately from enum shape problems.
"""

from __future__ import annotations

import pytest

from sitecheck.env.field_types import (
    BooleanFieldType,
    EnumFieldType,
    NumberFieldType,
    StringFieldType,
    field_type_declaration,
    parse_field_type,
)
from sitecheck.env.metadata import METADATA_KEYS
from sitecheck.errors import IssueKind, ValidationError


def _kind(declaration: dict[str, object]) -> IssueKind | None:
    with pytest.raises(ValidationError) as excinfo:
        parse_field_type(declaration, key="API_URL")
    return excinfo.value.kind


def test_each_tag_selects_its_shape() -> None:
    assert parse_field_type({"type": "string"}, key="A") == StringFieldType()
    assert parse_field_type({"type": "number", "default": 3}, key="A") == NumberFieldType(
        default=3
    )
    assert parse_field_type({"type": "boolean", "optional": True}, key="A") == BooleanFieldType(
        optional=True
    )
    assert parse_field_type(
        {"type": "enum", "values": ["a", "b"], "default": "b"}, key="A"
    ) == EnumFieldType(values=("a", "b"), default="b")


@pytest.mark.parametrize("tag", ["date", "String", "", None, 1])
def test_unknown_type_tag_is_a_shape_error(tag: object) -> None:
    assert _kind({"type": tag}) is IssueKind.INVALID_FIELD_SHAPE


def test_missing_type_tag_is_a_shape_error() -> None:
    assert _kind({"default": "x"}) is IssueKind.INVALID_FIELD_SHAPE


@pytest.mark.parametrize(
    "declaration",
    [
        {"type": "string", "default": 1},
        {"type": "number", "default": "1"},
        {"type": "number", "default": True},
        {"type": "number", "default": float("nan")},
        {"type": "boolean", "default": "true"},
        {"type": "boolean", "default": 0},
        {"type": "string", "optional": "yes"},
    ],
)
def test_defaults_are_never_coerced(declaration: dict[str, object]) -> None:
    assert _kind(declaration) is IssueKind.INVALID_FIELD_SHAPE


def test_values_belong_to_enum_shape_only() -> None:
    assert _kind({"type": "string", "values": ["a"]}) is IssueKind.INVALID_FIELD_SHAPE


def test_metadata_keys_are_ignored_when_requested() -> None:
    parsed = parse_field_type(
        {"type": "string", "context": "server", "access": "secret"},
        key="A",
        ignored_keys=METADATA_KEYS,
    )
    assert parsed == StringFieldType()


@pytest.mark.parametrize(
    "values",
    [[], "abc", ["ok", 2], ["it's"], None],
)
def test_malformed_enum_values_are_shape_errors(values: object) -> None:
    assert _kind({"type": "enum", "values": values}) is IssueKind.INVALID_FIELD_SHAPE


def test_quote_in_enum_value_is_reported_before_default_membership() -> None:
    with pytest.raises(ValidationError) as excinfo:
        parse_field_type({"type": "enum", "values": ["it's"], "default": "nope"}, key="MODE")
    assert excinfo.value.kind is IssueKind.INVALID_FIELD_SHAPE
    assert "can't be used as an enum value" in excinfo.value.issues[0].message


def test_enum_default_outside_values_names_default_and_values() -> None:
    with pytest.raises(ValidationError) as excinfo:
        parse_field_type(
            {"type": "enum", "values": ["dev", "prod"], "default": "staging"}, key="MODE"
        )

    assert excinfo.value.kind is IssueKind.INVALID_ENUM_DEFAULT
    message = excinfo.value.issues[0].message
    assert '"staging"' in message
    assert "dev, prod" in message


def test_empty_string_enum_default_must_still_be_a_member() -> None:
    assert (
        _kind({"type": "enum", "values": ["a"], "default": ""}) is IssueKind.INVALID_ENUM_DEFAULT
    )


def test_declaration_roundtrip_preserves_shape() -> None:
    parsed = parse_field_type({"type": "enum", "values": ["a", "b"], "optional": True}, key="A")

    declaration = field_type_declaration(parsed)

    assert declaration == {"type": "enum", "values": ["a", "b"], "optional": True}
    assert parse_field_type(declaration, key="A") == parsed


@pytest.mark.parametrize(
    "declaration",
    [{"type": "number", "default": 8080}, {"type": "number", "optional": False, "default": 8080}],
)
def test_declaration_omits_optional_when_not_set(declaration: dict[str, object]) -> None:
    parsed = parse_field_type(declaration, key="PORT")

    assert field_type_declaration(parsed) == {"type": "number", "default": 8080}
