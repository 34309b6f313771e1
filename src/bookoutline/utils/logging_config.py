"""Logging setup shared by the library, CLI and server."""

from __future__ import annotations

import logging
import sys

from bookoutline.config import BOOKOUTLINE_LOG_LEVEL

_PACKAGE_LOGGERS = ("bookoutline", "server")
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "bookoutline-stderr"


class _ExtraFormatter(logging.Formatter):
    """Append ``extra={...}`` fields to the rendered message."""

    _RESERVED = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in self._RESERVED
        }
        if not extras:
            return base
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} [{rendered}]"


def configure_logging(level: str | int | None = None) -> None:
    """Attach a single stderr handler to the package loggers.

    The handler writes to ``sys.stderr`` as it is at call time. Calling it
    again replaces the handler installed by an earlier call and updates the
    level, so there is never more than one.
    """
    resolved = level if level is not None else BOOKOUTLINE_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()

    for name in _PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
            logger.removeHandler(existing)
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(_ExtraFormatter(_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
