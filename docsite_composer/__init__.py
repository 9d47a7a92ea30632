"""Compose validated configuration for a static documentation site.

This package exposes the composer used by host build scripts and the ``site``
CLI that checks and normalizes configuration files before they reach the
external site builder.

Exports
-------
- ``compose``: Build an immutable ``SiteConfig`` from a raw mapping.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docsite_composer import compose
>>> compose({"title": "BeeORM"}).metadata.lang
'en-US'
>>> from docsite_composer import main
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main
from .config import compose

__all__ = ["app", "compose", "main"]
