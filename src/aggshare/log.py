"""Structured logging setup for aggshare."""

import logging
import sys
from typing import Dict, Optional

import structlog

from .constants import DEFAULT_LOG_LEVEL


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog for the sharing client.

    Log lines are emitted as JSON with ``level``, ``ts`` and ``msg`` keys plus
    whatever context the caller bound. Output goes to stderr so that payloads
    printed on stdout stay machine readable.
    """

    numeric_level = _level_from_str((level or DEFAULT_LOG_LEVEL).lower())

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _rename_event_to_msg,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )


def _rename_event_to_msg(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: Dict[str, object]
) -> Dict[str, object]:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


def _level_from_str(level: str) -> int:
    mapping: Dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }
    return mapping.get(level, logging.INFO)


__all__ = ["configure_logging"]
