"""Unit tests for length-prefix primitives."""

from __future__ import annotations

import io
import struct

import pytest

from ssbslp.codec.prefix import (
    LENGTH_PREFIX_SIZE,
    MAX_ITEM_LENGTH,
    pack_length,
    read_content,
    read_length_prefix,
    unpack_length,
    write_all,
)
from ssbslp.exceptions import ReadError


class TestPackLength:
    """Test prefix packing."""

    def test_constants(self) -> None:
        """Test prefix width and item limit."""
        assert LENGTH_PREFIX_SIZE == 2
        assert MAX_ITEM_LENGTH == 65535

    def test_pack_values(self) -> None:
        """Test prefix byte layout."""
        assert pack_length(0) == b"\x00\x00"
        assert pack_length(1) == b"\x01\x00"
        assert pack_length(256) == b"\x00\x01"
        assert pack_length(0x1234) == b"\x34\x12"
        assert pack_length(MAX_ITEM_LENGTH) == b"\xff\xff"

    def test_pack_out_of_range(self) -> None:
        """Test lengths outside u16 are rejected."""
        with pytest.raises(struct.error):
            pack_length(MAX_ITEM_LENGTH + 1)

    def test_unpack_values(self) -> None:
        """Test prefix decoding."""
        assert unpack_length(b"\x01\x00") == 1
        assert unpack_length(b"\x00\x01") == 256
        assert unpack_length(b"\xff\xff") == 65535


class TestReadLengthPrefix:
    """Test prefix reads against a source."""

    def test_clean_end(self) -> None:
        """Test an exhausted source yields None."""
        assert read_length_prefix(io.BytesIO(b"")) is None

    def test_full_prefix(self) -> None:
        """Test a full prefix is decoded and consumed."""
        source = io.BytesIO(b"\x03\x00rest")
        assert read_length_prefix(source) == 3
        assert source.read() == b"rest"

    def test_partial_prefix(self) -> None:
        """Test one byte of prefix raises ReadError."""
        with pytest.raises(ReadError, match="1 of 2"):
            read_length_prefix(io.BytesIO(b"\x03"))


class TestReadContent:
    """Test exact content reads."""

    def test_exact(self) -> None:
        """Test exactly the requested bytes are read."""
        source = io.BytesIO(b"abcdef")
        assert read_content(source, 4) == b"abcd"
        assert source.read() == b"ef"

    def test_zero_length(self) -> None:
        """Test a zero-length read touches nothing."""
        source = io.BytesIO(b"abc")
        assert read_content(source, 0) == b""
        assert source.tell() == 0

    def test_short(self) -> None:
        """Test a short source raises ReadError."""
        with pytest.raises(ReadError, match="says 4 bytes, but got 2"):
            read_content(io.BytesIO(b"ab"), 4)


class TestWriteAll:
    """Test complete writes to a sink."""

    def test_write_bytes(self) -> None:
        """Test bytes land in the sink."""
        sink = io.BytesIO()
        write_all(sink, b"hello")
        assert sink.getvalue() == b"hello"

    def test_write_empty(self) -> None:
        """Test an empty buffer writes nothing."""
        sink = io.BytesIO()
        write_all(sink, b"")
        assert sink.getvalue() == b""

    def test_none_return_means_complete(self) -> None:
        """Test a sink returning None is taken as having written everything."""

        class NoneSink:
            def __init__(self) -> None:
                self.data = bytearray()

            def write(self, data: bytes) -> None:
                self.data.extend(data)

        sink = NoneSink()
        write_all(sink, b"abc")
        assert bytes(sink.data) == b"abc"
