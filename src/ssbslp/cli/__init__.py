"""Command-line tools for ssbslp."""

from __future__ import annotations

from .config import InspectOptions
from .dump import inspect_stream
from .pack import pack_files

__all__ = [
    "InspectOptions",
    "inspect_stream",
    "pack_files",
]
