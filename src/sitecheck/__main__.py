"""Module entrypoint for ``python -m sitecheck``."""

from __future__ import annotations

from sitecheck.main import cli_entrypoint

if __name__ == "__main__":
    raise SystemExit(cli_entrypoint())
