"""Length-prefix primitives for SLP streams.

This module holds the byte-level building blocks shared by the encoder and the
decoder: packing and unpacking the 2-byte little-endian length field, and
exact reads/writes against caller-supplied sinks and sources.

Reading a length prefix and reading item content are separate
functions. Running out of input before the first prefix byte is a clean end of
stream; running out anywhere else is a truncation.
"""

from __future__ import annotations

import struct
from typing import Optional, Protocol, Union

from ..exceptions import ReadError, WriteError

LENGTH_PREFIX_SIZE = 2
MAX_ITEM_LENGTH = 0xFFFF

_LENGTH_PREFIX = struct.Struct("<H")


class ByteSink(Protocol):
    """Anything with a binary ``write`` method (files, BytesIO, socket streams)."""

    def write(self, data: bytes, /) -> Optional[int]: ...


class ByteSource(Protocol):
    """Anything with a blocking binary ``read`` method (files, BytesIO, socket streams).

    ``read(n)`` must return at most n bytes, and ``b""`` only at end of input.
    """

    def read(self, size: int = ..., /) -> Optional[bytes]: ...


def pack_length(length: int) -> bytes:
    """Pack an item length into its 2-byte little-endian prefix.

    Raises:
        struct.error: If length is negative or exceeds MAX_ITEM_LENGTH
    """
    return _LENGTH_PREFIX.pack(length)


def unpack_length(prefix: bytes) -> int:
    """Unpack a 2-byte little-endian prefix into an item length.

    Example:
        >>> unpack_length(b"\\x01\\x00")
        1
        >>> unpack_length(b"\\x00\\x01")
        256
    """
    return _LENGTH_PREFIX.unpack(prefix)[0]


def write_all(sink: ByteSink, data: Union[bytes, memoryview]) -> None:
    """Write every byte of data to the sink.

    Raw streams may accept fewer bytes than offered, so the remainder is
    written again until the whole buffer has been taken.

    Raises:
        WriteError: If the sink raises OSError or accepts zero bytes
    """
    view = memoryview(data).cast("B")
    while view:
        try:
            written = sink.write(view)
        except OSError as err:
            raise WriteError(f"Sink failed to accept {len(view)} bytes: {err}") from err

        # Buffered writers that return None have taken the whole buffer
        if written is None:
            return
        if written == 0:
            raise WriteError(f"Sink accepted 0 of {len(view)} bytes")
        view = view[written:]


def _fill(source: ByteSource, view: memoryview) -> int:
    """Read from source into view until it is full or the source is exhausted.

    Returns:
        Number of bytes placed into view

    Raises:
        ReadError: If the source fails, has no data ready (a non-blocking
            stream returning None), or returns more bytes than requested
    """
    filled = 0
    while filled < len(view):
        wanted = len(view) - filled
        try:
            chunk = source.read(wanted)
        except OSError as err:
            raise ReadError(
                f"Source failed while reading: {err}", expected=len(view), received=filled
            ) from err
        if chunk is None:
            raise ReadError(
                "Source has no data ready; SLP sources must be blocking",
                expected=len(view),
                received=filled,
            )
        if not chunk:
            break
        if len(chunk) > wanted:
            raise ReadError(
                f"Source returned {len(chunk)} bytes when {wanted} were requested",
                expected=len(view),
                received=filled,
            )
        view[filled : filled + len(chunk)] = chunk
        filled += len(chunk)
    return filled


def read_length_prefix(source: ByteSource) -> Optional[int]:
    """Read the next length prefix from source.

    Returns:
        The item length, or None if the source was already exhausted

    Raises:
        ReadError: If only part of the prefix was available, or the source failed
    """
    prefix = bytearray(LENGTH_PREFIX_SIZE)
    received = _fill(source, memoryview(prefix))

    if received == 0:
        return None
    if received < LENGTH_PREFIX_SIZE:
        raise ReadError(
            f"Truncated length prefix: got {received} of {LENGTH_PREFIX_SIZE} bytes",
            expected=LENGTH_PREFIX_SIZE,
            received=received,
        )
    return unpack_length(bytes(prefix))


def read_content(source: ByteSource, length: int) -> bytes:
    """Read exactly length bytes of item content from source.

    Raises:
        ReadError: If the source ends before length bytes, or the source failed
    """
    buffer = bytearray(length)
    received = _fill(source, memoryview(buffer))

    if received < length:
        raise ReadError(
            f"Truncated item: length prefix says {length} bytes, but got {received} bytes",
            expected=length,
            received=received,
        )
    return bytes(buffer)
