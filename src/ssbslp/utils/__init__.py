"""Utility functions for ssbslp.

This module provides size and layout calculation for SLP streams.
"""

from __future__ import annotations

from .sizing import ItemSpan, encoded_size, item_offsets

__all__ = [
    "ItemSpan",
    "encoded_size",
    "item_offsets",
]
