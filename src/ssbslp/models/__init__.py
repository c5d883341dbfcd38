"""Pydantic value modeling for ssbslp."""

from __future__ import annotations

from .slp import SLP

__all__ = [
    "SLP",
]
