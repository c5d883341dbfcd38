"""SLP codec for ssbslp.

This module provides encoding and decoding of ordered byte items using
Shallow Length-Prefixed framing: each item is written as a 2-byte little-endian
length followed by its content.
"""

from __future__ import annotations

from .decoder import decode, decode_bytes, iter_decode
from .encoder import encode, encode_bytes
from .prefix import LENGTH_PREFIX_SIZE, MAX_ITEM_LENGTH, ByteSink, ByteSource

__all__ = [
    "encode",
    "encode_bytes",
    "decode",
    "decode_bytes",
    "iter_decode",
    "ByteSink",
    "ByteSource",
    "LENGTH_PREFIX_SIZE",
    "MAX_ITEM_LENGTH",
]
