from __future__ import annotations

"""Structural types for the handles accepted by the helpers."""

import typing as t

__all__ = [
    "AnyStr",
    "BufferLike",
    "LineReadable",
    "Readable",
    "Writable",
    "TextTransform",
    "LineTransform",
]

AnyStr = t.TypeVar('AnyStr', str, bytes)
BufferLike = t.Union[bytes, bytearray, memoryview, str]


@t.runtime_checkable
class LineReadable(t.Protocol[AnyStr]):
    def readline(self) -> AnyStr: ...


@t.runtime_checkable
class Readable(t.Protocol[AnyStr]):
    def read(self, size: int = ...) -> AnyStr: ...


@t.runtime_checkable
class Writable(t.Protocol[AnyStr]):
    def write(self, data: AnyStr) -> t.Any: ...


TextTransform = t.Callable[[str], str]
LineTransform = t.Callable[[t.Iterator[AnyStr]], t.Iterable[AnyStr]]
