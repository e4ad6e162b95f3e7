"""Structured logging for sumkit.

The container types never log. The only event sumkit emits is
``safe.captured``, raised at DEBUG by ``@safe`` when it turns an exception
into a Failure.

``configure_logging`` routes structlog and stdlib records through a single
``ProcessorFormatter`` handler, so an application that already logs through
the stdlib sees sumkit events in the same format.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
]

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt='iso'),
]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Install one stderr handler on the root logger and point structlog at it.

    Calling it again replaces the previous handler.

    Args:
        level: Logging level name. Unknown names fall back to INFO.
        json_output: Render JSON lines when True, console output otherwise.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Until ``configure_logging`` runs, stdlib's default WARNING threshold
    drops sumkit's DEBUG events.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
