#!/usr/bin/env python3
"""Basic usage example for ssbslp.

This example demonstrates:
1. Building an SLP value from byte items
2. Encoding to a stream
3. Decoding back and taking ownership of the items
4. Calculating encoded sizes and item offsets
"""

from __future__ import annotations

import io

from ssbslp import SLP, decode, encoded_size, item_offsets


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ssbslp Basic Usage Example")
    print("=" * 60)
    print()

    # Create a value
    print("1. Creating an SLP value...")
    slp = SLP(items=[b"\x01\x02\x03", b"\x04\x05\x06\x07", b""])
    print(f"   Items: {slp.items}")
    print()

    # Encode to an in-memory sink
    print("2. Encoding to a stream...")
    sink = io.BytesIO()
    slp.encode_write(sink)
    data = sink.getvalue()
    print(f"   Encoded: {data.hex(' ')}")
    print(f"   Size: {len(data)} bytes (predicted {encoded_size(slp)})")
    print()

    # Layout
    print("3. Item layout:")
    for span in item_offsets(slp):
        print(f"   item {span.index}: prefix at offset {span.offset}, {span.length} bytes")
    print()

    # Decode
    print("4. Decoding...")
    decoded = decode(io.BytesIO(data))
    print(f"   Round-trip OK: {decoded == slp}")
    items = decoded.into_inner()
    print(f"   Took {len(items)} items, value now holds {len(decoded)}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
