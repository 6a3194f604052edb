"""Unit tests for env field visibility metadata."""

from __future__ import annotations

import pytest

from sitecheck.env.metadata import (
    PUBLIC_CLIENT,
    PUBLIC_SERVER,
    SECRET_SERVER,
    FieldAccess,
    FieldContext,
    FieldMetadata,
    parse_field_metadata,
)
from sitecheck.errors import IssueKind, ValidationError


@pytest.mark.parametrize(
    ("declaration", "expected"),
    [
        ({"context": "client", "access": "public"}, PUBLIC_CLIENT),
        ({"context": "server", "access": "public"}, PUBLIC_SERVER),
        ({"context": "server", "access": "secret"}, SECRET_SERVER),
    ],
)
def test_legal_combinations_parse(declaration: dict[str, object], expected: FieldMetadata) -> None:
    assert parse_field_metadata(declaration, key="A") == expected


@pytest.mark.parametrize(
    "declaration",
    [
        {"context": "client", "access": "secret"},
        {"context": "edge", "access": "public"},
        {"context": "server"},
        {"access": "public"},
        {"context": "SERVER", "access": "secret"},
    ],
)
def test_other_combinations_are_shape_errors(declaration: dict[str, object]) -> None:
    with pytest.raises(ValidationError) as excinfo:
        parse_field_metadata(declaration, key="A")
    assert excinfo.value.kind is IssueKind.INVALID_FIELD_SHAPE


def test_client_secret_is_not_representable() -> None:
    with pytest.raises(ValueError):
        FieldMetadata(FieldContext.CLIENT, FieldAccess.SECRET)


def test_to_declaration_uses_plain_strings() -> None:
    assert SECRET_SERVER.to_declaration() == {"context": "server", "access": "secret"}
    assert PUBLIC_CLIENT.is_public
    assert not SECRET_SERVER.is_public
