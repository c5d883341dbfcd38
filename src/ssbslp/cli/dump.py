"""Stream inspection CLI command."""

from __future__ import annotations

import sys
from typing import TextIO

from ..codec.decoder import decode
from ..codec.prefix import ByteSource
from ..utils.sizing import encoded_size, item_offsets
from .config import InspectOptions


def inspect_stream(
    source: ByteSource,
    options: InspectOptions | None = None,
    out: TextIO | None = None,
) -> int:
    """Decode an SLP stream and print a per-item breakdown.

    The whole stream is decoded before anything is printed, so a truncated
    stream produces an error and no listing.

    Args:
        source: Readable binary stream holding SLP data
        options: Presentation options (defaults to InspectOptions())
        out: Text stream to print to (defaults to sys.stdout)

    Returns:
        Number of items in the stream

    Raises:
        ReadError: If the stream is truncated or the source fails
    """
    options = options or InspectOptions()
    out = out or sys.stdout

    items = decode(source).into_inner()

    print("|" * 7, "ssb-slp: Shallow Length-Prefixed encoding", "|" * 7, file=out)
    print(
        f"{len(items)} item{'s' if len(items) != 1 else ''} decoded, "
        f"{encoded_size(items)} bytes total.",
        file=out,
    )
    print(file=out)

    for span, item in zip(item_offsets(items), items):
        line = f"[{span.index:>4}]"
        if options.show_offsets:
            line += f" @{span.offset:<8}"
        line += f" len={span.length:<5}"
        if options.preview_bytes and item:
            preview = item[: options.preview_bytes].hex(" ")
            if len(item) > options.preview_bytes:
                preview += " ..."
            line += f"  {preview}"
        print(line, file=out)

    return len(items)
