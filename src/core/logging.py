"""Structured logging setup (structlog).

Usage:
    >>> from core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("lookup_started", identifier_kind="cep")

The module configures itself on import from `AppSettings`, so library users
get level filtering and stderr output without calling anything. Entry points
(CLI) call `configure_logging` again with their own settings.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from core.config import AppSettings


class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever `sys.stderr` is at emit time."""

    @property
    def stream(self) -> Any:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: Any) -> None:
        pass


_handler: logging.Handler | None = None


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure stdlib logging and the structlog processor chain.

    Logs go to stderr so that `--json` output on stdout stays machine readable.
    Calling it again replaces the previous handler instead of stacking one more.
    """

    global _handler

    settings = settings or AppSettings()
    level = _resolve_level(settings.log_level)

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = _StderrHandler()
    _handler.setLevel(level)
    root.addHandler(_handler)
    root.setLevel(level)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.log_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # Sin cache: una reconfiguración (CLI) debe llegar a los loggers de módulo.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to `name` (typically `__name__`)."""

    return structlog.get_logger(name)


configure_logging()
