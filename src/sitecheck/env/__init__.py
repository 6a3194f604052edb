"""
sitecheck env package public API.

File: src/sitecheck/env/__init__.py

Purpose
- Export the env field model, schema validation entrypoint, and authoring helpers.
"""

from sitecheck.env.builders import EnvFieldBuilder, env_field
from sitecheck.env.field_types import (
    BooleanFieldType,
    EnumFieldType,
    FieldType,
    NumberFieldType,
    StringFieldType,
    parse_field_type,
)
from sitecheck.env.loader import load_schema_file
from sitecheck.env.metadata import (
    PUBLIC_CLIENT,
    PUBLIC_SERVER,
    SECRET_SERVER,
    FieldAccess,
    FieldContext,
    FieldMetadata,
    parse_field_metadata,
)
from sitecheck.env.schema import (
    EnvField,
    EnvSchema,
    dump_schema,
    naming_policy_issues,
    validate_env_schema,
)

__all__ = [
    "BooleanFieldType",
    "EnumFieldType",
    "EnvField",
    "EnvFieldBuilder",
    "EnvSchema",
    "FieldAccess",
    "FieldContext",
    "FieldMetadata",
    "FieldType",
    "NumberFieldType",
    "PUBLIC_CLIENT",
    "PUBLIC_SERVER",
    "SECRET_SERVER",
    "StringFieldType",
    "dump_schema",
    "env_field",
    "load_schema_file",
    "naming_policy_issues",
    "parse_field_metadata",
    "parse_field_type",
    "validate_env_schema",
]
