from __future__ import annotations

"""Helpers for resolving what kind of handle a caller passed in."""

import io
import sys
import typing as t

from .configs import get_settings
from .errors import HandleModeError

__all__ = [
    "get_stdin",
    "get_stdout",
    "is_binary_handle",
    "get_binary_handle",
    "get_newline",
    "strip_newline",
]


def get_stdin() -> t.TextIO:
    """
    Returns the current process standard input
    """
    return sys.stdin


def get_stdout() -> t.TextIO:
    """
    Returns the current process standard output
    """
    return sys.stdout


def is_binary_handle(handle: t.Any) -> bool:
    """Return ``True`` when ``handle`` reads and writes ``bytes``.

    ``io`` objects are classified by their base class.  Other file-like
    objects are classified by their ``mode`` when they carry one, and
    otherwise by exposing ``read1``/``readinto`` without an ``encoding``.
    """
    if isinstance(handle, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(handle, io.TextIOBase):
        return False
    mode = getattr(handle, 'mode', None)
    if isinstance(mode, str):
        return 'b' in mode
    if hasattr(handle, 'encoding'):
        return False
    return hasattr(handle, 'read1') or hasattr(handle, 'readinto')


def get_binary_handle(
    handle: t.Any,
    operation: str,
    flush: bool = False,
) -> t.BinaryIO:
    """Return the byte-level handle behind ``handle``.

    Binary handles are returned as-is.  Text handles are unwrapped to their
    ``.buffer``; with ``flush`` set, pending text output is flushed first so
    the bytes land after it.  Reading through ``.buffer`` skips whatever the
    text layer has already read ahead.

    Args:
        handle: The caller's handle.
        operation: Name of the requesting operation, used in errors.
        flush: Flush the text layer before returning its buffer.

    Raises:
        HandleModeError: ``handle`` is a text handle with no ``.buffer``.
    """
    if is_binary_handle(handle):
        return handle
    buffer = getattr(handle, 'buffer', None)
    if buffer is None:
        raise HandleModeError(
            handle,
            operation,
            f"{type(handle).__name__} is a text handle without an underlying binary buffer",
        )
    if flush: handle.flush()
    return buffer


def get_newline(line: t.Union[str, bytes, bytearray]) -> t.Union[str, bytes]:
    """
    Returns the configured newline as ``bytes`` or ``str`` to match ``line``
    """
    settings = get_settings()
    return settings.newline_bytes if isinstance(line, (bytes, bytearray)) else settings.newline


def strip_newline(
    line: t.AnyStr,
    newline: t.Optional[t.AnyStr] = None,
) -> t.AnyStr:
    """Remove a single trailing newline from ``line``.

    ``newline`` is tried first; a bare line feed is stripped otherwise, which
    covers text handles that already translated the platform line ending.
    """
    if newline and line.endswith(newline):
        return line[:-len(newline)]
    lf = b'\n' if isinstance(line, bytes) else '\n'
    return line[:-1] if line.endswith(lf) else line
