from __future__ import annotations

"""Loguru-backed logging for the handle helpers.

The package owns a private loguru core so that configuring it never touches
the application's global ``loguru.logger``.  Records go to standard error:
standard output is frequently the data stream these helpers write to.
"""

import logging
import sys
import threading
import typing as t

from loguru._logger import Core as _Core
from loguru._logger import Logger

from .configs import get_settings

__all__ = [
    "Logger",
    "NullLogger",
    "create_default_logger",
    "change_logger_level",
    "get_logger",
    "get_autologger",
    "logger",
    "null_logger",
]

DEFAULT_FORMAT = (
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_lock = threading.RLock()
_logger_contexts: t.Dict[str, Logger] = {}
_sink_id: t.Optional[int] = None
_sink_level: t.Optional[t.Union[str, int]] = None


def _stderr_sink(message: t.Any) -> None:
    # looked up per record, tests and callers swap sys.stderr
    sys.stderr.write(message)


def _add_sink(_logger: Logger, level: t.Union[str, int]) -> None:
    global _sink_id, _sink_level
    if _sink_id is not None:
        _logger.remove(_sink_id)
    _sink_id = _logger.add(
        _stderr_sink,
        level = level,
        format = DEFAULT_FORMAT,
        colorize = False,
        backtrace = False,
    )
    _sink_level = level


def create_global_logger(level: t.Union[str, int] = "INFO") -> Logger:
    """Instantiate the package-wide logger on a private loguru core.

    Args:
        level: Minimum level of the standard error sink.

    Returns:
        Logger: The configured loguru logger.
    """
    _logger = Logger(
        core = _Core(),
        exception = None,
        depth = 0,
        record = False,
        lazy = False,
        colors = False,
        raw = False,
        capture = True,
        patchers = [],
        extra = {'name': 'lzh'},
    )
    _add_sink(_logger, level)
    _logger_contexts['lzh'] = _logger
    return _logger


def create_default_logger(
    name: t.Optional[str] = None,
    level: t.Optional[t.Union[str, int]] = None,
) -> Logger:
    """Return the package logger, or a child bound to ``name``.

    Args:
        name: Optional logger namespace, shown in the ``name`` column.
        level: Sink level used if the package logger has to be created.

    Returns:
        Logger: The shared logger or a cached bound child.
    """
    name = name or 'lzh'
    if name in _logger_contexts:
        return _logger_contexts[name]
    with _lock:
        if 'lzh' not in _logger_contexts:
            create_global_logger(level = level or get_settings().log_level)
        if name not in _logger_contexts:
            _logger_contexts[name] = _logger_contexts['lzh'].bind(name = name)
    return _logger_contexts[name]


def change_logger_level(level: t.Union[str, int] = "INFO") -> None:
    """Update the minimum level of the standard error sink."""
    if isinstance(level, str): level = level.upper()
    with _lock:
        _add_sink(create_default_logger(), level)


def _noop(self: t.Any, *args: t.Any, **kwargs: t.Any) -> None:
    return None


class NullLogger(logging.Logger):
    """Stand-in that swallows every log call, including loguru's extra levels."""

    info = debug = warning = error = critical = _noop
    exception = log = trace = success = _noop


def get_autologger() -> t.Union[Logger, NullLogger]:
    """Return the logger when debugging is enabled, otherwise the null logger.

    With debugging on, the standard error sink follows ``settings.log_level``,
    lowered to ``DEBUG`` when it is set above it so the package traces show.
    """
    settings = get_settings()
    if not settings.debug_enabled:
        return null_logger
    level = settings.log_level
    if logger.level(level).no > logger.level('DEBUG').no:
        level = 'DEBUG'
    if level != _sink_level:
        change_logger_level(level)
    return logger


get_logger = create_default_logger
logger = create_default_logger('lzh')
null_logger = NullLogger(name = 'lzh.null')
