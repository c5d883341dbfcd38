"""Exception hierarchy for ssbslp.

Every error raised by the codec inherits from SLPError and carries an ErrorKind
tag, so callers can either catch a concrete class or dispatch on ``err.kind``.
The low-level fault that triggered the error (``struct.error`` or ``OSError``)
is chained as ``__cause__``.
"""

from __future__ import annotations

import enum
from typing import ClassVar, Optional


class ErrorKind(enum.Enum):
    """Tag identifying which codec failure occurred."""

    ITEM_TOO_LONG = "item_too_long"
    WRITE_ERROR = "write_error"
    READ_ERROR = "read_error"


class SLPError(Exception):
    """Base exception for all ssbslp errors."""

    kind: ClassVar[ErrorKind]


class EncodeError(SLPError):
    """Raised when encoding items to a sink fails.

    Examples:
        - An item is longer than the 2-byte length prefix can describe
        - The sink refused or failed to accept bytes
    """

    pass


class DecodeError(SLPError):
    """Raised when decoding items from a source fails.

    Examples:
        - Stream ends in the middle of a length prefix
        - Stream ends before an item's declared length
        - The source failed with an I/O error
    """

    pass


class ItemTooLongError(EncodeError):
    """An item's length does not fit in an unsigned 16-bit prefix.

    Attributes:
        index: Position of the offending item in the input sequence
        length: Byte length of the offending item
    """

    kind = ErrorKind.ITEM_TOO_LONG

    def __init__(self, message: str, *, index: int, length: int) -> None:
        super().__init__(message)
        self.index = index
        self.length = length


class WriteError(EncodeError):
    """The sink failed to accept bytes."""

    kind = ErrorKind.WRITE_ERROR


class ReadError(DecodeError):
    """The source could not supply the bytes that were required.

    Attributes:
        expected: Number of bytes the read required (None if unknown)
        received: Number of bytes actually obtained before failing (None if unknown)
    """

    kind = ErrorKind.READ_ERROR

    def __init__(
        self,
        message: str,
        *,
        expected: Optional[int] = None,
        received: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received
