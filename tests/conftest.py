"""Shared pytest fixtures for sitecheck tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sitecheck.observability.logging import shutdown_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _cleanup_logging() -> Iterator[None]:
    yield
    shutdown_logging()
