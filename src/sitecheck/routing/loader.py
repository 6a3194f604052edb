"""Load route inputs from disk: recorded static paths results and route modules."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

from sitecheck.errors import SchemaLoadError
from sitecheck.utils.documents import PathLike, load_document


def load_static_paths_file(path: PathLike) -> object:
    """Return the document unchanged; its shape is the validator's concern."""

    return load_document(path)


def load_route_module(path: PathLike) -> ModuleType:
    """Import a route module from a ``.py`` file without registering it in ``sys.modules``."""

    resolved = Path(path).expanduser()
    if resolved.suffix != ".py":
        raise SchemaLoadError(f"{resolved}: route modules must be .py files")
    if not resolved.is_file():
        raise SchemaLoadError(f"file not found: {resolved}")

    spec = importlib.util.spec_from_file_location(f"_sitecheck_route_{resolved.stem}", resolved)
    if spec is None or spec.loader is None:
        raise SchemaLoadError(f"{resolved}: unable to create an import spec")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except SyntaxError as exc:
        raise SchemaLoadError(f"{resolved}: invalid Python ({exc})") from exc
    return module


__all__ = ["load_route_module", "load_static_paths_file"]
