"""Structured logging setup for the textfold command line."""
from __future__ import annotations

import logging
import sys
from typing import IO, Dict

import structlog

_DEFAULT_LEVEL = "info"
_LEVELS: Dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def configure_logging(level: str | None = None, stream: IO[str] | None = None) -> None:
    """Route structlog events to ``stream`` (standard error by default) as JSON lines.

    Each line carries ``level``, ``ts``, ``msg`` and ``component`` plus any bound
    context. Standard output is left to command results such as folded bytes.
    Library calls never log, so nothing is written until a command does.
    """

    numeric_level = _LEVELS.get((level or _DEFAULT_LEVEL).lower(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(stream or sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def _add_component(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    # Named after the emitting module unless the caller bound one.
    event_dict.setdefault("component", getattr(logger, "name", None) or "textfold")
    return event_dict


__all__ = ["configure_logging"]
