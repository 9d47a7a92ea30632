"""Shared pytest fixtures."""

from __future__ import annotations

import typing as typ

import pytest
import structlog

from docsite_composer.logging import configure_logging

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture(autouse=True)
def _reset_structlog() -> cabc.Iterator[None]:
    """Restore the package's quiet logging defaults after each test.

    Commands reconfigure structlog with the capture streams of the running
    test; later tests must not write to those.
    """
    yield
    structlog.reset_defaults()
    configure_logging()
