"""Leveled, structured logging interface and a default implementation."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


@runtime_checkable
class Logger(Protocol):
    """A leveled logger taking a message followed by key/value pairs."""

    def trace(self, msg: str, *args: Any) -> None:
        """Log a trace event, finer grained than debug."""

    def debug(self, msg: str, *args: Any) -> None:
        """Log a debug event."""

    def info(self, msg: str, *args: Any) -> None:
        """Log an informational event."""

    def warn(self, msg: str, *args: Any) -> None:
        """Log a warning event."""

    def error(self, msg: str, *args: Any) -> None:
        """Log an error event."""


def format_log_message(msg: str, *args: Any) -> str:
    """Append ``key=value`` pairs from ``args`` to ``msg``.

    An odd trailing key is paired with ``None``.
    """
    pairs = list(args)
    if len(pairs) % 2 == 1:
        pairs.append(None)
    parts = [msg]
    parts.extend(f"{key}={value}" for key, value in zip(pairs[::2], pairs[1::2]))
    return " ".join(parts)


class StdLogger:
    """Logger backed by the standard :mod:`logging` module."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("configlayers")

    def _log(self, level: int, msg: str, args: tuple[Any, ...]) -> None:
        self._logger.log(level, "%s", format_log_message(msg, *args))

    def trace(self, msg: str, *args: Any) -> None:
        """Log a trace event."""
        self._log(TRACE, msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        """Log a debug event."""
        self._log(logging.DEBUG, msg, args)

    def info(self, msg: str, *args: Any) -> None:
        """Log an informational event."""
        self._log(logging.INFO, msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        """Log a warning event."""
        self._log(logging.WARNING, msg, args)

    def error(self, msg: str, *args: Any) -> None:
        """Log an error event."""
        self._log(logging.ERROR, msg, args)