"""Diagnostics for claimdiff runs.

Log events are JSON lines on stderr so that stdout carries nothing but the
rendered report, and ``claimdiff compare ... > report.txt`` captures a clean
report while load failures and debug counts stay visible on the terminal.
"""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(level: str = "warning") -> None:
    """Route log events at or above *level* to stderr as JSON lines.

    Unknown level names fall back to warning.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Reconfigured on every command run, so bound loggers must not be cached.
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger whose events carry ``component``, e.g. "loader" or "compare.nodes"."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
