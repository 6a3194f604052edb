"""Stable constants shared across the env-schema and routing validators."""

from __future__ import annotations

import re
from typing import Final

# Env schema naming policy.
PUBLIC_PREFIX: Final[str] = "PUBLIC_"
ENV_KEY_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Z_]+$")
ENUM_FORBIDDEN_CHAR: Final[str] = "'"

# Field declaration vocabulary.
FIELD_TYPE_TAGS: Final[tuple[str, ...]] = ("string", "number", "boolean", "enum")

# Routing.
STATIC_PATHS_EXPORT: Final[str] = "get_static_paths"
STATIC_PATHS_WARNING_LABEL: Final[str] = "getStaticPaths"

# Tool settings.
SETTINGS_FILE: Final[str] = "sitecheck.toml"
SETTINGS_ENV_PREFIX: Final[str] = "SITECHECK_"

REDACTED_PLACEHOLDER: Final[str] = "<redacted>"

__all__ = [
    "ENUM_FORBIDDEN_CHAR",
    "ENV_KEY_PATTERN",
    "FIELD_TYPE_TAGS",
    "PUBLIC_PREFIX",
    "REDACTED_PLACEHOLDER",
    "SETTINGS_ENV_PREFIX",
    "SETTINGS_FILE",
    "STATIC_PATHS_EXPORT",
    "STATIC_PATHS_WARNING_LABEL",
]
