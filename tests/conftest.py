"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from typing import Optional

import pytest


class TrickleSource:
    """Source that hands out at most one byte per read, like a slow pipe."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)

    def read(self, size: int = -1) -> bytes:
        return self._buffer.read(min(size, 1) if size >= 0 else 1)


class FailingSource:
    """Source that serves some bytes, then raises OSError."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)

    def read(self, size: int = -1) -> bytes:
        chunk = self._buffer.read(size)
        if not chunk:
            raise OSError("connection reset")
        return chunk


class FailingSink:
    """Sink that accepts a fixed number of write calls, then raises OSError."""

    def __init__(self, accept_writes: int = 0) -> None:
        self.accept_writes = accept_writes
        self.data = bytearray()

    def write(self, data: bytes) -> int:
        if self.accept_writes <= 0:
            raise OSError("broken pipe")
        self.accept_writes -= 1
        self.data.extend(data)
        return len(data)


class ShortWriteSink:
    """Sink that takes at most `chunk` bytes per write, or stalls at 0."""

    def __init__(self, chunk: int = 1) -> None:
        self.chunk = chunk
        self.data = bytearray()

    def write(self, data: bytes) -> Optional[int]:
        taken = bytes(data[: self.chunk])
        self.data.extend(taken)
        return len(taken)


@pytest.fixture
def sample_items() -> list[bytes]:
    """Sample items for testing."""
    return [b"\x01\x02\x03", b"\x04\x05\x06\x07"]


@pytest.fixture
def sample_stream() -> bytes:
    """Encoded form of sample_items."""
    return bytes.fromhex("03 00 01 02 03 04 00 04 05 06 07")
