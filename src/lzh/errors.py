from __future__ import annotations

"""Exceptions raised when a handle helper is misused.

Failures coming from the handles themselves (``OSError``, ``ValueError`` on a
closed file, codec errors) are never wrapped; they reach the caller exactly as
the underlying ``io`` object raised them.
"""

import typing as t

__all__ = [
    "HandleError",
    "HandleModeError",
    "InvalidCountError",
]


class HandleError(Exception):
    """Base class for lazyhandles errors"""


class HandleModeError(HandleError, TypeError):
    """Describes a handle that cannot serve the requested kind of I/O"""

    def __init__(self, handle: t.Any, operation: str, msg: t.Optional[str] = None) -> None:
        msg = msg or f"{type(handle).__name__} does not support {operation}"
        super().__init__(msg)
        self.handle = handle
        """The handle that was rejected"""

        self.operation = operation
        """The operation that was attempted"""


class InvalidCountError(HandleError, ValueError):
    """Describes a negative byte count passed to a buffer read"""

    def __init__(self, count: int) -> None:
        super().__init__(f"Byte count must be non-negative, got {count}")
        self.count = count
