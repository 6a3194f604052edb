"""
sitecheck — settings loader.

File: src/sitecheck/config/loader.py

Purpose
- Load effective settings from defaults, ``sitecheck.toml``, env vars, and CLI flags.

Functional requirements
- Precedence: CLI > env (SITECHECK_) > file > defaults.
- An explicitly given settings file must exist; the default one is optional.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Literal

from sitecheck.config.schema import SiteCheckSettings, default_settings
from sitecheck.constants import SETTINGS_ENV_PREFIX, SETTINGS_FILE
from sitecheck.errors import SettingsError

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "t", "yes", "y", "on"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "f", "no", "n", "off"})


@dataclass(frozen=True, slots=True)
class _Binding:
    name: str
    path: tuple[str, str]
    value_type: Literal["str", "bool"]


_BINDINGS: Final[tuple[_Binding, ...]] = (
    _Binding("public_prefix", ("env", "public_prefix"), "str"),
    _Binding("log_level", ("logging", "level"), "str"),
    _Binding("log_format", ("logging", "format"), "str"),
    _Binding("ssr", ("routing", "ssr"), "bool"),
)


def load_settings(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    cli_overrides: Mapping[str, object] | None = None,
) -> SiteCheckSettings:
    """Load effective settings with precedence CLI > env > file > defaults."""

    resolved_path = _resolve_config_path(config_path)
    env_map = dict(os.environ if environ is None else environ)

    file_payload = _load_toml_file(resolved_path, required=config_path is not None)

    merged = merge_settings(default_settings(), file_payload)
    merged = merge_settings(merged, _collect_env_overrides(env_map))
    merged = merge_settings(merged, _collect_cli_overrides(cli_overrides or {}))
    return SiteCheckSettings.from_payload(merged)


def merge_settings(base: Mapping[str, object], overlay: Mapping[str, object]) -> dict[str, Any]:
    """Deep-merge ``overlay`` onto a copy of ``base``."""

    merged: dict[str, Any] = {}
    for key, value in base.items():
        merged[key] = dict(value) if isinstance(value, Mapping) else value
    for key, value in overlay.items():
        existing = merged.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            existing.update(value)
        else:
            merged[key] = value
    return merged


def _resolve_config_path(config_path: str | Path | None) -> Path:
    if config_path is None:
        return (Path.cwd() / SETTINGS_FILE).resolve()
    return Path(config_path).expanduser().resolve()


def _load_toml_file(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise SettingsError([("<file>", f"settings file not found: {path}")])
        return {}

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise SettingsError([("<file>", f"invalid TOML in {path}: {exc}")]) from exc
    except UnicodeDecodeError as exc:
        raise SettingsError([("<file>", f"{path} is not valid UTF-8: {exc}")]) from exc
    except OSError as exc:
        raise SettingsError([("<file>", f"unable to read settings file {path}: {exc}")]) from exc


def _collect_env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for binding in _BINDINGS:
        env_name = f"{SETTINGS_ENV_PREFIX}{binding.name.upper()}"
        raw = environ.get(env_name)
        if raw is None:
            continue
        section, key = binding.path
        overrides.setdefault(section, {})[key] = _coerce_env(raw, binding, env_name)
    return overrides


def _collect_cli_overrides(cli_overrides: Mapping[str, object]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for binding in _BINDINGS:
        value = cli_overrides.get(binding.name)
        if value is None:
            continue
        section, key = binding.path
        overrides.setdefault(section, {})[key] = value
    return overrides


def _coerce_env(raw: str, binding: _Binding, env_name: str) -> object:
    if binding.value_type == "str":
        return raw.strip()
    normalized = raw.strip().lower()
    if normalized in _BOOLEAN_TRUE:
        return True
    if normalized in _BOOLEAN_FALSE:
        return False
    raise SettingsError([(env_name, f"invalid boolean value {raw!r}")])


__all__ = ["load_settings", "merge_settings"]
