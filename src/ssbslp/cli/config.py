"""Presentation options for the ssb-slp CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InspectOptions:
    """Options controlling how ``ssb-slp --inspect`` prints a stream.

    Attributes:
        preview_bytes: Number of leading content bytes shown as hex per item
            (default 16). 0 disables the preview column.
        show_offsets: Print the stream offset of each item's length prefix,
            default True

    Examples:
        ```python
        from ssbslp.cli.config import InspectOptions

        # Compact listing, lengths only
        options = InspectOptions(preview_bytes=0, show_offsets=False)
        ```
    """

    preview_bytes: int = 16
    show_offsets: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.preview_bytes < 0:
            raise ValueError(f"preview_bytes must be >= 0, got {self.preview_bytes}")
