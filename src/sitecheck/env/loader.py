"""Load env field declarations from a schema file."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from sitecheck.errors import SchemaLoadError
from sitecheck.utils.documents import PathLike, load_document


def load_schema_file(path: PathLike) -> dict[str, object]:
    """Return the raw declarations mapping stored in ``path``.

    The declarations may sit at the document root or under an ``env.schema``
    table, the way they appear inside a larger site config.
    """

    loaded = load_document(path)
    if not isinstance(loaded, Mapping):
        raise SchemaLoadError(
            f"{Path(path)}: expected a mapping of variable names, got {type(loaded).__name__}"
        )

    env_section = loaded.get("env")
    if isinstance(env_section, Mapping) and "schema" in env_section:
        nested = env_section["schema"]
        if not isinstance(nested, Mapping):
            raise SchemaLoadError(
                f"{Path(path)}: env.schema must be a mapping, got {type(nested).__name__}"
            )
        return dict(nested)
    return dict(loaded)


__all__ = ["load_schema_file"]
