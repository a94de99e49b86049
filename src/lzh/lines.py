from __future__ import annotations

"""Line-oriented reading and writing over open handles.

Combined, :func:`read_lines` and :func:`write_lines` make small filters easy
to write::

    lines = read_lines(sys.stdin)
    write_lines(sys.stdout, (line for line in lines if line.startswith("1")))

Nothing is read until the consumer asks for the next line, so the filter
above starts producing output before the whole input exists.
"""

import typing as t

from .logging import get_autologger
from .utils import get_newline, strip_newline

if t.TYPE_CHECKING:
    from .types import LineReadable, Writable

__all__ = [
    "write_lines",
    "read_lines",
]


def write_lines(handle: 'Writable[t.AnyStr]', lines: t.Iterable[t.AnyStr]) -> None:
    """Write each item of ``lines`` to ``handle`` followed by a newline.

    Items are written in order, one ``write`` call per item, and are not
    expected to contain newlines themselves.  An empty iterable performs no
    I/O.  Errors raised by ``handle.write`` propagate unchanged.

    Args:
        handle: An open text or binary handle.
        lines: ``str`` or ``bytes`` items; each gets a newline of its own
            type.  Generators are consumed lazily.
    """
    count = 0
    for line in lines:
        handle.write(line + get_newline(line))
        count += 1
    get_autologger().debug("Wrote {} lines", count)


def read_lines(handle: 'LineReadable[t.AnyStr]') -> t.Iterator[t.AnyStr]:
    """Lazily yield the lines of ``handle`` with their newline removed.

    Each step issues a single ``readline`` call; an empty result is
    end-of-file and ends the iteration, so no phantom trailing line is ever
    produced.  A last line lacking a newline is still yielded.  Consuming the
    iterator consumes the handle.

    Args:
        handle: An open text or binary handle.

    Yields:
        ``str`` lines for text handles, ``bytes`` lines for binary ones.
    """
    count = 0
    while True:
        line = handle.readline()
        if not line:
            get_autologger().debug("Reached EOF after {} lines", count)
            return
        count += 1
        yield strip_newline(line, get_newline(line))
