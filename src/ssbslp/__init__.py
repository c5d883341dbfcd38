"""ssbslp: Shallow Length-Prefixed encoding

A Python library for the SLP encoding used by the Secure Scuttlebutt envelope
message format. An SLP stream is a flat sequence of byte items, each written as
a 2-byte little-endian length followed by the item's bytes. There is no count,
magic number or terminator: a decoder reads items until the source is cleanly
exhausted at an item boundary.

Wire format:
    stream := item*
    item   := length (u16, little-endian) content (length bytes)

Key Features:
- Streaming encode/decode against any binary file-like sink or source
- Pydantic-based SLP value model
- Tagged exception hierarchy with the underlying fault chained as the cause
- Pure Python implementation

Quick Start:
    >>> from ssbslp import SLP, decode_bytes, encode_bytes
    >>>
    >>> data = encode_bytes([b"\\x01\\x02\\x03", b"\\x04\\x05\\x06\\x07"])
    >>> data.hex(" ")
    '03 00 01 02 03 04 00 04 05 06 07'
    >>> decode_bytes(data).into_inner()
    [b'\\x01\\x02\\x03', b'\\x04\\x05\\x06\\x07']

Envelope spec: https://github.com/ssbc/envelope-spec/blob/master/encoding/slp.md
"""

from __future__ import annotations

from .codec import (
    LENGTH_PREFIX_SIZE,
    MAX_ITEM_LENGTH,
    decode,
    decode_bytes,
    encode,
    encode_bytes,
    iter_decode,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    ErrorKind,
    ItemTooLongError,
    ReadError,
    SLPError,
    WriteError,
)
from .models import SLP
from .utils import ItemSpan, encoded_size, item_offsets

__version__ = "0.1.0"

__all__ = [
    # Core API
    "SLP",
    "encode",
    "decode",
    "encode_bytes",
    "decode_bytes",
    "iter_decode",
    # Format constants
    "LENGTH_PREFIX_SIZE",
    "MAX_ITEM_LENGTH",
    # Exceptions
    "SLPError",
    "ErrorKind",
    "EncodeError",
    "DecodeError",
    "ItemTooLongError",
    "WriteError",
    "ReadError",
    # Sizing
    "ItemSpan",
    "encoded_size",
    "item_offsets",
    # Version
    "__version__",
]
