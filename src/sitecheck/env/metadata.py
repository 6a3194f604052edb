"""Env field visibility metadata: the three legal (context, access) combinations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, TypeVar

from sitecheck.errors import IssueKind, SourceLocation, ValidationError


class FieldContext(StrEnum):
    CLIENT = "client"
    SERVER = "server"


class FieldAccess(StrEnum):
    PUBLIC = "public"
    SECRET = "secret"


TEnum = TypeVar("TEnum", bound=StrEnum)

METADATA_KEYS: Final[frozenset[str]] = frozenset({"context", "access"})

_LEGAL_PAIRS: Final[frozenset[tuple[FieldContext, FieldAccess]]] = frozenset(
    {
        (FieldContext.CLIENT, FieldAccess.PUBLIC),
        (FieldContext.SERVER, FieldAccess.PUBLIC),
        (FieldContext.SERVER, FieldAccess.SECRET),
    }
)


@dataclass(frozen=True, slots=True)
class FieldMetadata:
    """Where a variable is available and whether it may be exposed."""

    context: FieldContext
    access: FieldAccess

    def __post_init__(self) -> None:
        if (self.context, self.access) not in _LEGAL_PAIRS:
            raise ValueError(
                f"unsupported field metadata: context={self.context}, access={self.access}"
            )

    @property
    def is_public(self) -> bool:
        return self.access is FieldAccess.PUBLIC

    def to_declaration(self) -> dict[str, str]:
        return {"context": str(self.context), "access": str(self.access)}


PUBLIC_CLIENT: Final[FieldMetadata] = FieldMetadata(FieldContext.CLIENT, FieldAccess.PUBLIC)
PUBLIC_SERVER: Final[FieldMetadata] = FieldMetadata(FieldContext.SERVER, FieldAccess.PUBLIC)
SECRET_SERVER: Final[FieldMetadata] = FieldMetadata(FieldContext.SERVER, FieldAccess.SECRET)


def parse_field_metadata(
    declaration: Mapping[str, object],
    *,
    key: str,
    location: SourceLocation | None = None,
) -> FieldMetadata:
    """Match the ``(context, access)`` pair of one declaration."""

    context = _parse_member(declaration.get("context"), FieldContext, "context", key, location)
    access = _parse_member(declaration.get("access"), FieldAccess, "access", key, location)

    if (context, access) not in _LEGAL_PAIRS:
        raise ValidationError.single(
            IssueKind.INVALID_FIELD_SHAPE,
            f"{key}: {access} variables cannot be used in the {context} context",
            location=location,
        )
    return FieldMetadata(context=context, access=access)


def _parse_member(
    value: object,
    enum_type: type[TEnum],
    name: str,
    key: str,
    location: SourceLocation | None,
) -> TEnum:
    allowed = tuple(member.value for member in enum_type)
    if isinstance(value, str) and value in allowed:
        return enum_type(value)
    rendered = "missing" if value is None else repr(value)
    raise ValidationError.single(
        IssueKind.INVALID_FIELD_SHAPE,
        f"{key}: invalid {name} {rendered}; expected one of: {', '.join(allowed)}",
        location=location,
    )


__all__ = [
    "FieldAccess",
    "FieldContext",
    "FieldMetadata",
    "METADATA_KEYS",
    "PUBLIC_CLIENT",
    "PUBLIC_SERVER",
    "SECRET_SERVER",
    "parse_field_metadata",
]
