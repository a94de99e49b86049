from __future__ import annotations

import io

import pytest

from lzh.buffers import read_buffer, read_buffer_full, write_buffer
from lzh.errors import HandleModeError, InvalidCountError


class TrickleReader(io.RawIOBase):
    """Raw stream that hands out at most ``step`` bytes per read."""

    def __init__(self, data: bytes, step: int = 1) -> None:
        self._data = data
        self._step = step
        self.reads: list[int] = []

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        self.reads.append(len(buffer))
        size = min(len(buffer), self._step, len(self._data))
        buffer[:size] = self._data[:size]
        self._data = self._data[size:]
        return size


class ForbiddenReader(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        raise AssertionError('read should not be called')


def test_write_buffer_writes_bytes_unchanged():
    handle = io.BytesIO()

    write_buffer(handle, b'\x00\x01\xfe\xff')

    assert handle.getvalue() == b'\x00\x01\xfe\xff'


def test_write_buffer_writes_one_byte_per_character():
    handle = io.BytesIO()
    payload = 'ctrl\x00\x07\r\n\xe9\xff'

    write_buffer(handle, payload)

    assert len(handle.getvalue()) == len(payload)
    assert handle.getvalue() == payload.encode('latin-1')


def test_write_buffer_adds_no_newline():
    handle = io.BytesIO()

    write_buffer(handle, 'abc')
    write_buffer(handle, 'def')

    assert handle.getvalue() == b'abcdef'


def test_write_buffer_uses_configured_encoding():
    from lzh.configs import get_settings

    get_settings(buffer_encoding='utf-8')
    handle = io.BytesIO()

    write_buffer(handle, 'é')

    assert handle.getvalue() == b'\xc3\xa9'


def test_write_buffer_goes_through_text_handle_buffer_after_pending_text():
    raw = io.BytesIO()
    text = io.TextIOWrapper(raw, encoding='utf-8', write_through=False)

    text.write('head:')
    write_buffer(text, b'\x00tail')

    assert raw.getvalue() == b'head:\x00tail'


def test_write_buffer_rejects_text_handle_without_buffer():
    with pytest.raises(HandleModeError):
        write_buffer(io.StringIO(), b'data')


def test_read_buffer_zero_count_does_not_read():
    assert read_buffer(ForbiddenReader(), 0) == b''


def test_read_buffer_negative_count_is_rejected():
    with pytest.raises(InvalidCountError):
        read_buffer(io.BytesIO(b'abc'), -1)


def test_read_buffer_returns_short_read_without_looping():
    raw = TrickleReader(b'abcdef', step=2)

    assert read_buffer(raw, 5) == b'ab'
    assert len(raw.reads) == 1


def test_read_buffer_returns_empty_bytes_at_eof():
    handle = io.BytesIO(b'xy')

    assert read_buffer(handle, 10) == b'xy'
    assert read_buffer(handle, 10) == b''


def test_read_buffer_uses_single_raw_read_on_buffered_reader():
    raw = TrickleReader(b'0123456789', step=3)
    handle = io.BufferedReader(raw, buffer_size=4)

    data = read_buffer(handle, 8)

    assert 0 < len(data) <= 8
    assert b'0123456789'.startswith(data)


def test_read_buffer_full_zero_count_does_not_read():
    assert read_buffer_full(ForbiddenReader(), 0) == b''


def test_read_buffer_full_negative_count_is_rejected():
    with pytest.raises(InvalidCountError):
        read_buffer_full(io.BytesIO(b'abc'), -3)


def test_read_buffer_full_accumulates_short_reads():
    raw = TrickleReader(b'abcdefgh', step=3)

    assert read_buffer_full(raw, 7) == b'abcdefg'
    assert raw.reads == [7, 4, 1]


def test_read_buffer_full_returns_available_bytes_at_eof():
    handle = io.BytesIO(b'short')

    assert read_buffer_full(handle, 100) == b'short'
    assert read_buffer_full(handle, 100) == b''


def test_read_buffer_full_read_count_is_bounded_by_request():
    raw = TrickleReader(b'abcd', step=1)

    assert read_buffer_full(raw, 4) == b'abcd'
    assert len(raw.reads) == 4


def test_buffer_round_trip_preserves_every_byte_value():
    payload = bytes(range(256)) * 2
    handle = io.BytesIO()
    write_buffer(handle, payload)
    write_buffer(handle, b'trailing')
    handle.seek(0)

    assert read_buffer_full(handle, len(payload)) == payload
    assert read_buffer_full(handle, 8) == b'trailing'


def test_string_round_trip_preserves_control_characters():
    payload = '\x00\x01\x1b[0m\t\r\n\x7f'
    handle = io.BytesIO()
    write_buffer(handle, payload)
    handle.seek(0)

    assert read_buffer_full(handle, len(payload)).decode('latin-1') == payload


def test_read_buffer_full_on_file(tmp_path):
    path = tmp_path / 'blob.bin'
    with path.open('wb') as handle:
        write_buffer(handle, b'\x00' * 10 + b'end')

    with path.open('rb') as handle:
        assert read_buffer_full(handle, 10) == b'\x00' * 10
        assert read_buffer_full(handle, 10) == b'end'
        assert read_buffer_full(handle, 10) == b''


def test_read_buffer_full_reads_through_text_handle_buffer():
    text = io.TextIOWrapper(io.BytesIO(b'\x00\xffbinary'), encoding='utf-8')

    assert read_buffer_full(text, 3) == b'\x00\xffb'
    assert read_buffer_full(text, 100) == b'inary'


def test_read_buffer_rejects_binary_handle_without_read():
    class WriteOnly:
        mode = 'wb'

        def write(self, data):
            return len(data)

    with pytest.raises(HandleModeError):
        read_buffer(WriteOnly(), 4)
