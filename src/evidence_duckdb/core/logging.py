"""structlog setup for evidence-duckdb.

All log output goes to stderr; stdout carries query results only. The CLI
calls setup_logging() with its --verbose flag. Library callers of
run_query() that never configure structlog get a quiet stderr default
from get_logger(), filtered at EVIDENCE_DUCKDB_LOG_LEVEL (warning when
unset).
"""

import logging
import os
import sys
from typing import Any

import structlog

LOG_LEVEL_ENV = "EVIDENCE_DUCKDB_LOG_LEVEL"
DEFAULT_LIBRARY_LEVEL = "warning"

_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class _LazyStderrFactory:
    """Look up sys.stderr per logger so swapped streams (CliRunner, capsys) are honoured."""

    def __call__(self, *args: Any, **kwargs: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=sys.stderr)


def _configure(level: str) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LOG_LEVELS[level]),
        context_class=dict,
        logger_factory=_LazyStderrFactory(),
        cache_logger_on_first_use=False,
    )


def library_log_level(environ: dict[str, str] | None = None) -> str:
    """Level used when nobody configured logging; unknown names fall back."""
    if environ is None:
        environ = dict(os.environ)
    level = environ.get(LOG_LEVEL_ENV, DEFAULT_LIBRARY_LEVEL).strip().lower()
    return level if level in _LOG_LEVELS else DEFAULT_LIBRARY_LEVEL


def setup_logging(verbose: bool = False) -> None:
    """Configure structlog for the CLI: DEBUG with ``verbose``, INFO otherwise."""
    _configure("debug" if verbose else "info")


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound with ``logger=name``.

    Leaves an existing structlog configuration alone, whether it came from
    setup_logging(), the host application or structlog.testing.
    """
    if not structlog.is_configured():
        _configure(library_log_level())
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger
