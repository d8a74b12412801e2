"""Package-local logging utilities.

This package is a library first. By default it emits no logs unless the host
application configures logging. CLI users can opt into logs via
``CITEREF_LOG_LEVEL``, ``--log-level`` or ``-v``.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import suppress

from loguru import logger as _loguru_logger

LOGGER_NAME = "citeref"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOGURU_FORMAT = "{time:YYYY-MM-DD HH:mm:ss,SSS} | {level} | {name} | {message}"
_LOGURU_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

# Id of the loguru sink added by configure_logging; host sinks are never touched.
_loguru_sink_id: int | None = None


def configure_logging(level: str | None = None) -> None:
    """Configure package logging for CLI/runtime diagnostics.

    Covers the stdlib ``citeref`` logger and the loguru traces emitted by the
    parsing modules. When a level is resolved, a single loguru stderr sink is
    added, replacing only the one added by a previous call. If neither
    ``level`` nor ``CITEREF_LOG_LEVEL`` is provided, both are silenced.
    """
    global _loguru_sink_id
    env_level = os.getenv("CITEREF_LOG_LEVEL", "")
    raw_level = level if level is not None else (env_level or "")
    resolved_level = raw_level.strip().upper()
    pkg_logger = logging.getLogger(LOGGER_NAME)
    # Always reset handlers to avoid stale stderr streams across repeated CLI calls.
    pkg_logger.handlers = []
    _remove_loguru_sink()

    if not resolved_level:
        pkg_logger.addHandler(logging.NullHandler())
        pkg_logger.setLevel(logging.NOTSET)
        pkg_logger.propagate = False
        _loguru_logger.disable(LOGGER_NAME)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(getattr(logging, resolved_level, logging.INFO))
    pkg_logger.propagate = False

    _loguru_sink_id = _loguru_logger.add(
        sys.stderr,
        level=resolved_level if resolved_level in _LOGURU_LEVELS else "INFO",
        format=LOGURU_FORMAT,
        filter=LOGGER_NAME,
    )
    _loguru_logger.enable(LOGGER_NAME)


def _remove_loguru_sink() -> None:
    global _loguru_sink_id
    if _loguru_sink_id is None:
        return
    # The host may already have removed it with logger.remove().
    with suppress(ValueError):
        _loguru_logger.remove(_loguru_sink_id)
    _loguru_sink_id = None
