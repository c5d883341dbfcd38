"""Encoded size calculation utilities.

This module provides functions to calculate the size and layout of an SLP
stream without actually encoding it.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

from ..codec.encoder import BytesLike
from ..codec.prefix import LENGTH_PREFIX_SIZE


class ItemSpan(NamedTuple):
    """Location of one item inside an encoded stream."""

    index: int
    offset: int  # offset of the length prefix
    length: int  # content length, excluding the prefix


def encoded_size(items: Iterable[BytesLike]) -> int:
    """Calculate the encoded size of a sequence of items in bytes.

    Each item costs its own length plus the 2-byte length prefix. The limit on
    item length is not checked here.

    Example:
        >>> encoded_size([b"\\x01\\x02\\x03", b"\\x04\\x05\\x06\\x07"])
        11
        >>> encoded_size([])
        0
    """
    return sum(LENGTH_PREFIX_SIZE + memoryview(item).nbytes for item in items)


def item_offsets(items: Iterable[BytesLike]) -> list[ItemSpan]:
    """Get the stream offset and content length of each item.

    Example:
        >>> item_offsets([b"abc", b""])
        [ItemSpan(index=0, offset=0, length=3), ItemSpan(index=1, offset=5, length=0)]
    """
    spans = []
    offset = 0
    for index, item in enumerate(items):
        length = memoryview(item).nbytes
        spans.append(ItemSpan(index, offset, length))
        offset += LENGTH_PREFIX_SIZE + length
    return spans
