from __future__ import annotations

import sys
from pathlib import Path

import pytest

from sitecheck.errors import SchemaLoadError
from sitecheck.routing import load_route_module, load_static_paths_file

_ROUTE_SOURCE = '''
def get_static_paths():
    return [{"params": {"slug": "hello"}}]
'''


def test_route_module_is_imported_from_file(tmp_path: Path) -> None:
    path = tmp_path / "post.py"
    path.write_text(_ROUTE_SOURCE, encoding="utf-8")

    module = load_route_module(path)

    assert module.get_static_paths() == [{"params": {"slug": "hello"}}]
    assert module.__name__ not in sys.modules


def test_route_module_errors_are_load_errors(tmp_path: Path) -> None:
    broken = tmp_path / "broken.py"
    broken.write_text("def get_static_paths(:\n", encoding="utf-8")

    with pytest.raises(SchemaLoadError, match="invalid Python"):
        load_route_module(broken)
    with pytest.raises(SchemaLoadError, match="file not found"):
        load_route_module(tmp_path / "absent.py")
    with pytest.raises(SchemaLoadError, match="must be .py files"):
        load_route_module(tmp_path / "paths.json")


def test_static_paths_file_is_returned_unchanged(tmp_path: Path) -> None:
    path = tmp_path / "paths.yaml"
    path.write_text("- params:\n    slug: null\n- params: {}\n", encoding="utf-8")

    assert load_static_paths_file(path) == [{"params": {"slug": None}}, {"params": {}}]
