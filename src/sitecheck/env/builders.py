"""Helpers for authoring env field declarations in Python.

The builders only assemble raw declaration dicts; ``validate_env_schema`` is the
single place where declarations are checked.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final


class EnvFieldBuilder:
    """Build raw declarations, e.g. ``env_field.string(context="client", access="public")``."""

    @staticmethod
    def string(
        *,
        context: str,
        access: str,
        optional: bool | None = None,
        default: str | None = None,
    ) -> dict[str, Any]:
        return _declaration("string", context, access, optional, default)

    @staticmethod
    def number(
        *,
        context: str,
        access: str,
        optional: bool | None = None,
        default: float | None = None,
    ) -> dict[str, Any]:
        return _declaration("number", context, access, optional, default)

    @staticmethod
    def boolean(
        *,
        context: str,
        access: str,
        optional: bool | None = None,
        default: bool | None = None,
    ) -> dict[str, Any]:
        return _declaration("boolean", context, access, optional, default)

    @staticmethod
    def enum(
        *,
        values: Sequence[str],
        context: str,
        access: str,
        optional: bool | None = None,
        default: str | None = None,
    ) -> dict[str, Any]:
        declaration = _declaration("enum", context, access, optional, default)
        declaration["values"] = list(values)
        return declaration


def _declaration(
    tag: str,
    context: str,
    access: str,
    optional: bool | None,
    default: object,
) -> dict[str, Any]:
    out: dict[str, Any] = {"type": tag, "context": context, "access": access}
    if optional is not None:
        out["optional"] = optional
    if default is not None:
        out["default"] = default
    return out


env_field: Final[EnvFieldBuilder] = EnvFieldBuilder()

__all__ = ["EnvFieldBuilder", "env_field"]
