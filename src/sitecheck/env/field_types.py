"""
sitecheck — env field type shapes.

File: src/sitecheck/env/field_types.py

Purpose
- Model the closed set of field types (string, number, boolean, enum) as frozen
  dataclasses and parse raw declarations into exactly one of them.

Functional requirements
- The literal ``type`` tag selects the shape; no shape accepts another's input.
- No coercion: a wrong default type is rejected, never converted.
- Enum default membership is checked only after the base enum shape matched.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Final, assert_never

from sitecheck.constants import ENUM_FORBIDDEN_CHAR, FIELD_TYPE_TAGS
from sitecheck.errors import IssueKind, SourceLocation, ValidationError


@dataclass(frozen=True, slots=True)
class StringFieldType:
    tag: ClassVar[str] = "string"

    optional: bool = False
    default: str | None = None


@dataclass(frozen=True, slots=True)
class NumberFieldType:
    tag: ClassVar[str] = "number"

    optional: bool = False
    default: int | float | None = None


@dataclass(frozen=True, slots=True)
class BooleanFieldType:
    tag: ClassVar[str] = "boolean"

    optional: bool = False
    default: bool | None = None


@dataclass(frozen=True, slots=True)
class EnumFieldType:
    tag: ClassVar[str] = "enum"

    values: tuple[str, ...]
    optional: bool = False
    default: str | None = None


FieldType = StringFieldType | NumberFieldType | BooleanFieldType | EnumFieldType

_COMMON_KEYS: Final[frozenset[str]] = frozenset({"type", "optional", "default"})
TYPE_KEYS: Final[Mapping[str, frozenset[str]]] = {
    "string": _COMMON_KEYS,
    "number": _COMMON_KEYS,
    "boolean": _COMMON_KEYS,
    "enum": _COMMON_KEYS | {"values"},
}


def parse_field_type(
    declaration: Mapping[str, object],
    *,
    key: str,
    ignored_keys: frozenset[str] = frozenset(),
    location: SourceLocation | None = None,
) -> FieldType:
    """Match ``declaration`` against exactly one field type shape.

    ``ignored_keys`` names keys owned by another part of the declaration (the
    context/access metadata) so they are not reported as unknown fields.
    """

    tag = declaration.get("type")
    if not isinstance(tag, str) or tag not in TYPE_KEYS:
        expected = ", ".join(FIELD_TYPE_TAGS)
        raise _shape_error(
            key, f"invalid type {_describe(tag)}; expected one of: {expected}", location
        )

    allowed = TYPE_KEYS[tag] | ignored_keys
    for name in sorted(str(item) for item in declaration):
        if name not in allowed:
            raise _shape_error(key, f"unknown field {name!r} for a {tag} declaration", location)

    optional = _parse_optional(declaration, key, location)

    if tag == "string":
        return StringFieldType(
            optional=optional,
            default=_parse_default(declaration, key, location, _is_string, "a string"),
        )
    if tag == "number":
        return NumberFieldType(
            optional=optional,
            default=_parse_default(declaration, key, location, _is_number, "a finite number"),
        )
    if tag == "boolean":
        return BooleanFieldType(
            optional=optional,
            default=_parse_default(declaration, key, location, _is_boolean, "a boolean"),
        )

    parsed = EnumFieldType(
        values=_parse_enum_values(declaration.get("values"), key, location),
        optional=optional,
        default=_parse_default(declaration, key, location, _is_string, "a string"),
    )
    _check_enum_default(parsed, key, location)
    return parsed


def field_type_declaration(field_type: FieldType) -> dict[str, Any]:
    """Return the raw declaration keys a parsed field type was built from."""

    out: dict[str, Any] = {"type": field_type.tag}
    if field_type.optional:
        out["optional"] = True
    if isinstance(field_type, EnumFieldType):
        out["values"] = list(field_type.values)
    elif isinstance(field_type, (StringFieldType, NumberFieldType, BooleanFieldType)):
        pass
    else:
        assert_never(field_type)
    if field_type.default is not None:
        out["default"] = field_type.default
    return out


def _parse_optional(
    declaration: Mapping[str, object],
    key: str,
    location: SourceLocation | None,
) -> bool:
    if "optional" not in declaration:
        return False
    value = declaration["optional"]
    if not isinstance(value, bool):
        raise _shape_error(key, f"optional must be a boolean, got {_type_name(value)}", location)
    return value


def _parse_default(
    declaration: Mapping[str, object],
    key: str,
    location: SourceLocation | None,
    accepts: Any,
    expected: str,
) -> Any:
    if "default" not in declaration:
        return None
    value = declaration["default"]
    if not accepts(value):
        raise _shape_error(key, f"default must be {expected}, got {_describe(value)}", location)
    return value


def _parse_enum_values(
    raw: object,
    key: str,
    location: SourceLocation | None,
) -> tuple[str, ...]:
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise _shape_error(
            key, f"values must be a list of strings, got {_type_name(raw)}", location
        )
    if not raw:
        raise _shape_error(key, "values must not be empty", location)

    parsed: list[str] = []
    for index, item in enumerate(raw):
        if not isinstance(item, str):
            raise _shape_error(
                key, f"values[{index}] must be a string, got {_type_name(item)}", location
            )
        if ENUM_FORBIDDEN_CHAR in item:
            raise _shape_error(
                key,
                f'The "{ENUM_FORBIDDEN_CHAR}" character can\'t be used as an enum value '
                f"(values[{index}] = {item!r})",
                location,
            )
        parsed.append(item)
    return tuple(parsed)


def _check_enum_default(
    field_type: EnumFieldType,
    key: str,
    location: SourceLocation | None,
) -> None:
    if field_type.default is None or field_type.default in field_type.values:
        return
    raise ValidationError.single(
        IssueKind.INVALID_ENUM_DEFAULT,
        f'{key}: The default value "{field_type.default}" must be one of the specified '
        f"values: {', '.join(field_type.values)}.",
        location=location,
    )


def _is_string(value: object) -> bool:
    return isinstance(value, str)


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_boolean(value: object) -> bool:
    return isinstance(value, bool)


def _shape_error(key: str, message: str, location: SourceLocation | None) -> ValidationError:
    return ValidationError.single(
        IssueKind.INVALID_FIELD_SHAPE, f"{key}: {message}", location=location
    )


def _type_name(value: object) -> str:
    if value is None:
        return "None"
    return type(value).__name__


def _describe(value: object) -> str:
    if value is None:
        return "None"
    return f"{value!r} ({type(value).__name__})"


__all__ = [
    "BooleanFieldType",
    "EnumFieldType",
    "FieldType",
    "NumberFieldType",
    "StringFieldType",
    "TYPE_KEYS",
    "field_type_declaration",
    "parse_field_type",
]
