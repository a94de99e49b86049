from __future__ import annotations

"""Fixed-size binary reads and writes using ``bytes`` buffers."""

import typing as t

from .configs import get_settings
from .errors import HandleModeError, InvalidCountError
from .logging import get_autologger
from .utils import get_binary_handle

if t.TYPE_CHECKING:
    from .types import BufferLike

__all__ = [
    "write_buffer",
    "read_buffer",
    "read_buffer_full",
]


def write_buffer(handle: t.Any, data: 'BufferLike') -> None:
    """Write ``data`` to ``handle`` as a single binary write.

    ``str`` data is encoded with the configured buffer encoding
    (``latin-1`` by default, one byte per character).  No newline is
    appended.  Text handles are written through their ``.buffer``.

    Args:
        handle: An open binary handle, or a text handle backed by one.
        data: The bytes, or string, to write.

    Raises:
        HandleModeError: ``handle`` has no binary layer.
    """
    if isinstance(data, str):
        data = data.encode(get_settings().buffer_encoding)
    get_binary_handle(handle, 'write_buffer', flush = True).write(data)


def read_buffer(handle: t.Any, count: int) -> bytes:
    """Read up to ``count`` bytes from ``handle`` in one underlying call.

    The result may be shorter than ``count`` when fewer bytes are available;
    ``b''`` means end-of-file.  ``read1`` is used when the handle has it so a
    buffered stream performs at most one raw read.  A zero ``count`` returns
    ``b''`` without touching the handle.

    Args:
        handle: An open binary handle, or a text handle backed by one.
        count: Maximum number of bytes to read.

    Raises:
        InvalidCountError: ``count`` is negative.
        HandleModeError: ``handle`` has no binary layer.
    """
    if count < 0: raise InvalidCountError(count)
    if count == 0: return b''
    handle = get_binary_handle(handle, 'read_buffer')
    reader = getattr(handle, 'read1', None) or getattr(handle, 'read', None)
    if reader is None:
        raise HandleModeError(handle, 'read_buffer')
    data = reader(count)
    return data if isinstance(data, bytes) else bytes(data)


def read_buffer_full(handle: t.Any, count: int) -> bytes:
    """Read exactly ``count`` bytes unless end-of-file comes first.

    :func:`read_buffer` is called repeatedly with the remaining count until
    enough bytes have been gathered or a read returns ``b''``.  Each call
    either makes progress or ends the loop, so at most ``count`` reads are
    issued.

    Args:
        handle: An open binary handle, or a text handle backed by one.
        count: Number of bytes wanted.

    Returns:
        bytes: ``count`` bytes, or fewer (possibly none) at end-of-file.

    Raises:
        InvalidCountError: ``count`` is negative.
    """
    if count < 0: raise InvalidCountError(count)
    chunks: t.List[bytes] = []
    remaining = count
    while remaining > 0:
        chunk = read_buffer(handle, remaining)
        if not chunk:
            get_autologger().debug("Reached EOF after {} of {} bytes", count - remaining, count)
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b''.join(chunks)
