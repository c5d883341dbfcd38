"""SLP decoder.

This module provides decode() and iter_decode(), which read length-prefixed
items from a source until it is cleanly exhausted at an item boundary.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Iterator, Union

from .prefix import ByteSource, read_content, read_length_prefix

if TYPE_CHECKING:
    from ..models.slp import SLP


def iter_decode(source: ByteSource) -> Iterator[bytes]:
    """Lazily decode items from a source, one item per iteration.

    The stream has no item count. Iteration stops when the source has no bytes
    left where the next length prefix would start; that is the only valid end
    of stream.

    Args:
        source: Readable binary stream

    Yields:
        Item contents in stream order

    Raises:
        ReadError: If a length prefix or an item is truncated, or the source fails.
            Items yielded before the failure have already been handed out.
    """
    while True:
        length = read_length_prefix(source)
        if length is None:
            return
        yield read_content(source, length)


def decode(source: ByteSource) -> SLP:
    """Decode all items from a source into an SLP value.

    Args:
        source: Readable binary stream

    Returns:
        SLP value holding the items in stream order

    Raises:
        ReadError: If the stream is truncated or the source fails. No partial
            item list is returned.

    Example:
        >>> slp = decode(io.BytesIO(bytes.fromhex("0300010203040004050607")))
        >>> slp.items
        [b'\\x01\\x02\\x03', b'\\x04\\x05\\x06\\x07']
    """
    # Import here to avoid circular dependency
    from ..models.slp import SLP

    return SLP(items=list(iter_decode(source)))


def decode_bytes(data: Union[bytes, bytearray, memoryview]) -> SLP:
    """Decode an in-memory SLP stream.

    Raises:
        ReadError: If the data is truncated
    """
    return decode(io.BytesIO(data))
