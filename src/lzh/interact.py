from __future__ import annotations

"""Filters that turn an input handle into an output handle.

:func:`interact` hands the function the whole input as one string.
:func:`line_interact_on` hands it the lazy line iterator instead, which is
equivalent to splitting on newlines, applying the function, and joining the
result with a newline after every line::

    line_interact(lambda lines: (l for l in lines if l.startswith("1")))
"""

import typing as t

from .lines import read_lines, write_lines
from .logging import get_autologger
from .utils import get_stdin, get_stdout

if t.TYPE_CHECKING:
    from .types import LineTransform, TextTransform

__all__ = [
    "interact",
    "line_interact",
    "line_interact_on",
]


def interact(
    input: t.TextIO,
    output: t.TextIO,
    func: 'TextTransform',
) -> None:
    """Read all of ``input``, apply ``func`` and write the result to ``output``.

    The result always goes to ``output``, never to the process standard
    output unless that is the handle passed in.

    Args:
        input: Handle read to end-of-file.
        output: Handle the transformed content is written to.
        func: Function from the full content to the full output.
    """
    content = input.read()
    result = func(content)
    get_autologger().debug("Transformed {} characters into {}", len(content), len(result))
    output.write(result)


def line_interact_on(
    input: t.IO[t.AnyStr],
    output: t.IO[t.AnyStr],
    func: 'LineTransform[t.AnyStr]',
) -> None:
    """Apply a line transform from ``input`` to ``output``.

    ``func`` receives the lazy iterator from :func:`read_lines`, and its
    result is written with :func:`write_lines`, so a streaming ``func`` never
    holds the whole input in memory.

    Args:
        input: Handle whose lines are read.
        output: Handle the resulting lines are written to.
        func: Function from an iterator of lines to an iterable of lines.
    """
    write_lines(output, func(read_lines(input)))


def line_interact(
    func: 'LineTransform[str]',
    input: t.Optional[t.TextIO] = None,
    output: t.Optional[t.TextIO] = None,
) -> None:
    """
    Runs :func:`line_interact_on`, defaulting to the current standard input and output
    """
    line_interact_on(
        input if input is not None else get_stdin(),
        output if output is not None else get_stdout(),
        func,
    )
