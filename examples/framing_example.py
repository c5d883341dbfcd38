#!/usr/bin/env python3
"""Stream framing example for ssbslp.

This example demonstrates:
1. Sending SLP items across a socket
2. Reading items lazily as they arrive
3. Error handling for oversized items and truncated streams
"""

from __future__ import annotations

import socket

from ssbslp import (
    MAX_ITEM_LENGTH,
    ErrorKind,
    ItemTooLongError,
    ReadError,
    SLPError,
    decode_bytes,
    encode,
    encode_bytes,
    iter_decode,
)


def main() -> None:
    """Run the framing example."""
    print("=" * 60)
    print("ssbslp Stream Framing Example")
    print("=" * 60)
    print()

    # Send items across a socket pair
    print("1. Sending three items over a socket...")
    left, right = socket.socketpair()
    with left, right:
        with left.makefile("wb") as writer:
            encode([b"key-slot-1", b"key-slot-2", b"payload"], writer)
        left.shutdown(socket.SHUT_WR)

        with right.makefile("rb") as reader:
            for index, item in enumerate(iter_decode(reader)):
                print(f"   Received item {index}: {item!r}")
    print()

    # Item size limit
    print(f"2. Encoding an item longer than {MAX_ITEM_LENGTH} bytes...")
    try:
        encode_bytes([b"\x00" * (MAX_ITEM_LENGTH + 1)])
    except ItemTooLongError as e:
        print(f"   ✓ Rejected item {e.index} ({e.length} bytes)")
    print()

    # Truncation
    print("3. Decoding a truncated stream...")
    data = encode_bytes([b"complete", b"cut short"])
    try:
        decode_bytes(data[:-3])
    except ReadError as e:
        print(f"   ✓ {e}")
    print()

    # Dispatch on error kind
    print("4. Handling errors by kind...")
    for bad in (b"\x07", b"\x02\x00a"):
        try:
            decode_bytes(bad)
        except SLPError as e:
            if e.kind is ErrorKind.READ_ERROR:
                print(f"   ✓ {bad.hex(' ')}: read error ({e})")

    print()
    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
