"""Structured logging for adjgraph using structlog.

Library modules only call ``structlog.get_logger(__name__)``; this module
decides how those events are rendered. Events go through the standard
library ``logging`` module to stderr, so command output on stdout is never
mixed with logs.

Example:
    >>> from adjgraph.log_config import configure_logging, get_logger
    >>> configure_logging(level="INFO")
    >>> logger = get_logger(__name__)
    >>> logger.info("graph_loaded", vertex_count=8)
"""

import logging
import sys
from typing import Any

import structlog

CALLSITE_PARAMETERS = [
    structlog.processors.CallsiteParameter.MODULE,
    structlog.processors.CallsiteParameter.FUNC_NAME,
    structlog.processors.CallsiteParameter.LINENO,
]


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=False,
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """Configure structlog on top of the standard library logging module.

    May be called again to switch level or renderer: loggers are not cached,
    so module-level loggers pick up the new configuration on their next event.

    Args:
        level: Logging level name, case-insensitive
        json_logs: Render events with JSONRenderer instead of ConsoleRenderer

    Raises:
        ValueError: If ``level`` is not a logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)
    # basicConfig leaves an already configured root logger alone
    logging.getLogger().setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(parameters=CALLSITE_PARAMETERS),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.contextvars.merge_contextvars,
            _renderer(json_logs),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, typically named after the calling module."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables to every subsequent log event.

    Example:
        >>> bind_context(graph="data/directed.csv", command="toposort")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables from the logging context."""
    structlog.contextvars.clear_contextvars()
