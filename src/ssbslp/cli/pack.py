"""File packing CLI command."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..codec.encoder import encode
from ..codec.prefix import ByteSink


def pack_files(paths: Sequence[Path], sink: ByteSink) -> int:
    """Encode the contents of each file as one SLP item.

    Items are written in the order the paths are given.

    Args:
        paths: Files to pack
        sink: Writable binary stream for the SLP output

    Returns:
        Number of items written

    Raises:
        OSError: If a file cannot be read
        ItemTooLongError: If a file is larger than 65535 bytes
        WriteError: If the sink fails to accept bytes
    """
    # Read every file first so a missing file fails before any output
    items = [path.read_bytes() for path in paths]
    encode(items, sink)
    return len(items)
