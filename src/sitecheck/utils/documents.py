"""Read JSON, YAML, or TOML documents from disk by file suffix."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Final, TypeAlias, cast

import yaml

from sitecheck.errors import SchemaLoadError

PathLike: TypeAlias = str | os.PathLike[str]

DOCUMENT_SUFFIXES: Final[tuple[str, ...]] = (".json", ".toml", ".yaml", ".yml")


def load_document(path: PathLike) -> object:
    """Parse ``path`` according to its suffix; raise ``SchemaLoadError`` on failure."""

    resolved = Path(path).expanduser()
    suffix = resolved.suffix.lower()
    if suffix not in DOCUMENT_SUFFIXES:
        expected = ", ".join(DOCUMENT_SUFFIXES)
        raise SchemaLoadError(
            f"{resolved}: unsupported file type {suffix!r}; expected one of: {expected}"
        )

    try:
        if suffix == ".toml":
            with resolved.open("rb") as handle:
                return tomllib.load(handle)
        with resolved.open("r", encoding="utf-8") as handle:
            if suffix == ".json":
                return cast("object", json.load(handle))
            return cast("object", yaml.safe_load(handle))
    except FileNotFoundError as exc:
        raise SchemaLoadError(f"file not found: {resolved}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaLoadError(f"{resolved}: not valid UTF-8 ({exc})") from exc
    except tomllib.TOMLDecodeError as exc:
        raise SchemaLoadError(f"{resolved}: invalid TOML ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"{resolved}: invalid JSON ({exc})") from exc
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"{resolved}: invalid YAML ({exc})") from exc
    except OSError as exc:
        raise SchemaLoadError(f"unable to read {resolved}: {exc}") from exc


__all__ = ["DOCUMENT_SUFFIXES", "PathLike", "load_document"]
