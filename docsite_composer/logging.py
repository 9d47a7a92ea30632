"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys
import typing as typ

import structlog


def configure_logging(
    level: int = logging.WARNING,
    output: typ.TextIO | None = None,
    *,
    json_format: bool = False,
) -> None:
    """Configure structlog for the ``site`` CLI.

    Parameters
    ----------
    level : int, optional
        Minimum level emitted; the CLI lowers it to ``DEBUG`` for
        ``--verbose``.
    output : TextIO, optional
        Stream receiving log lines, ``stderr`` by default so that ``dump``
        output on ``stdout`` stays machine-readable.
    json_format : bool, optional
        Render JSON lines instead of the console renderer.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output or sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a bound logger for ``name``.

    When the host has not configured structlog yet, the package installs a
    ``WARNING`` threshold writing to stderr, so composing a site as a library
    stays silent. Call :func:`configure_logging` (or ``structlog.configure``)
    to change that.
    """
    if not structlog.is_configured():
        configure_logging()
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


__all__ = ["configure_logging", "get_logger"]
