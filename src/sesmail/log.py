# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Logging helpers for sesmail.

Clients accept an optional logger capability: any object implementing some of
`error`, `warn`, `info` and `debug`, each taking arbitrary values. `wrap_logger`
fills the gaps with no-ops so call sites never branch on logger presence.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Any

DEFAULT_LOG_LEVEL = os.getenv("SESMAIL_LOG_LEVEL", "WARNING").upper()

logger = logging.getLogger(__name__)

LogMethod = Callable[..., Any]
LEVELS = ("error", "warn", "info", "debug")


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _noop(*_values: Any) -> None:
    return None


def _callable_or_noop(func: Any) -> LogMethod:
    if func is None or not callable(func):
        return _noop

    def _safe(*values: Any) -> None:
        try:
            func(*values)
        except Exception:  # noqa: BLE001
            logger.debug("Injected logger raised; message dropped", exc_info=True)

    _safe.__wrapped__ = func  # type: ignore[attr-defined]
    return _safe


def _join_values(values: tuple[Any, ...]) -> str:
    return " ".join(str(value) for value in values)


class LogSink:
    """Logger capability with every severity guaranteed to be callable."""

    def __init__(
        self,
        error: LogMethod | None = None,
        warn: LogMethod | None = None,
        info: LogMethod | None = None,
        debug: LogMethod | None = None,
    ):
        self.error = _callable_or_noop(error)
        self.warn = _callable_or_noop(warn)
        self.info = _callable_or_noop(info)
        self.debug = _callable_or_noop(debug)

    @classmethod
    def from_logger(cls, target: logging.Logger) -> LogSink:
        """Bridge a stdlib logger; values are joined into a single message."""

        def emit(level: int) -> LogMethod:
            def _log(*values: Any) -> None:
                if target.isEnabledFor(level):
                    target.log(level, "%s", _join_values(values))

            return _log

        return cls(
            error=emit(logging.ERROR),
            warn=emit(logging.WARNING),
            info=emit(logging.INFO),
            debug=emit(logging.DEBUG),
        )

    def __repr__(self) -> str:
        active = [name for name in LEVELS if getattr(self, name) is not _noop]
        return f"LogSink(active={active})"


def wrap_logger(logger: Any = None) -> LogSink:
    """
    Adapt an optional, possibly partial, logger capability into a LogSink.

    Accepts None, an existing LogSink, a stdlib `logging.Logger`, a mapping of
    level name to callable, or any object exposing some of the level methods.
    """
    if isinstance(logger, LogSink):
        return logger
    if isinstance(logger, (logging.Logger, logging.LoggerAdapter)):
        return LogSink.from_logger(logger)  # type: ignore[arg-type]
    if logger is None:
        return LogSink()
    if isinstance(logger, dict):
        return LogSink(**{name: logger.get(name) for name in LEVELS})
    return LogSink(**{name: getattr(logger, name, None) for name in LEVELS})


__all__ = ["DEFAULT_LOG_LEVEL", "LogSink", "setup_logging", "wrap_logger"]
