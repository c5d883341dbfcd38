"""SLP encoder.

This module provides the encode() function that writes an ordered sequence of
byte items to a sink, each preceded by its 2-byte little-endian length.
"""

from __future__ import annotations

import io
import struct
from typing import Iterable, Union

from ..exceptions import ItemTooLongError
from .prefix import MAX_ITEM_LENGTH, ByteSink, pack_length, write_all

BytesLike = Union[bytes, bytearray, memoryview]


def encode(items: Iterable[BytesLike], sink: ByteSink) -> None:
    """Encode items to a sink using SLP framing.

    Items are written in order as ``length (u16 LE) + content``. There is no
    count prefix, padding or terminator.

    Args:
        items: Ordered byte items (an SLP value is also accepted)
        sink: Writable binary stream

    Raises:
        ItemTooLongError: If an item is longer than 65535 bytes. Nothing of that
            item is written, but earlier items stay in the sink.
        WriteError: If the sink fails to accept bytes

    Example:
        >>> buf = io.BytesIO()
        >>> encode([b"\\x01\\x02\\x03", b"\\x04\\x05\\x06\\x07"], buf)
        >>> buf.getvalue().hex(" ")
        '03 00 01 02 03 04 00 04 05 06 07'
    """
    for index, item in enumerate(items):
        content = memoryview(item)
        length = content.nbytes
        try:
            prefix = pack_length(length)
        except struct.error as err:
            raise ItemTooLongError(
                f"Item {index} is {length} bytes; SLP items are limited to "
                f"{MAX_ITEM_LENGTH} bytes",
                index=index,
                length=length,
            ) from err

        write_all(sink, prefix)
        write_all(sink, content)


def encode_bytes(items: Iterable[BytesLike]) -> bytes:
    """Encode items into a new bytes object.

    Raises:
        ItemTooLongError: If an item is longer than 65535 bytes

    Example:
        >>> encode_bytes([b""])
        b'\\x00\\x00'
    """
    buffer = io.BytesIO()
    encode(items, buffer)
    return buffer.getvalue()
