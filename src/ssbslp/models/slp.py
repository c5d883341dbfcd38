"""SLP value model.

This module provides the SLP class, a Pydantic model that owns an ordered
sequence of byte items and knows how to write itself to a sink and read
itself back from a source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from ..codec.prefix import ByteSink, ByteSource


class SLP(BaseModel):
    """An ordered sequence of byte items.

    Item lengths are not checked on construction. An item longer than 65535
    bytes can be held, and is rejected when the value is encoded.

    Example:
        >>> slp = SLP(items=[b"\\x01\\x02\\x03", b"\\x04\\x05\\x06\\x07"])
        >>> slp.to_bytes().hex(" ")
        '03 00 01 02 03 04 00 04 05 06 07'
        >>> SLP.from_bytes(slp.to_bytes()) == slp
        True
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    items: List[bytes] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _require_bytes_like(cls, value: Any) -> Any:
        """Accept bytes, bytearray and memoryview items; reject text.

        Pydantic would otherwise encode ``str`` items as UTF-8, which encode()
        refuses.
        """
        if isinstance(value, (str, bytes, bytearray, memoryview)):
            raise ValueError("items must be a sequence of byte items, not a single buffer")
        try:
            entries = list(value)
        except TypeError as err:
            raise ValueError(f"items must be a sequence, got {type(value).__name__}") from err

        converted = []
        for index, item in enumerate(entries):
            if isinstance(item, bytes):
                converted.append(item)
            elif isinstance(item, (bytearray, memoryview)):
                converted.append(bytes(item))
            else:
                raise ValueError(f"item {index} must be bytes-like, got {type(item).__name__}")
        return converted

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[bytes]:  # type: ignore[override]
        return iter(self.items)

    def __getitem__(self, index: int) -> bytes:
        return self.items[index]

    def encode_write(self, sink: ByteSink) -> None:
        """Write this value to sink in SLP framing.

        Raises:
            ItemTooLongError: If an item is longer than 65535 bytes
            WriteError: If the sink fails to accept bytes
        """
        # Import here to avoid circular dependency
        from ..codec.encoder import encode

        encode(self.items, sink)

    @classmethod
    def decode_read(cls, source: ByteSource) -> SLP:
        """Read an SLP value from source until it is exhausted.

        Raises:
            ReadError: If the stream is truncated or the source fails
        """
        from ..codec.decoder import decode

        return decode(source)

    def to_bytes(self) -> bytes:
        """Encode this value into a new bytes object."""
        from ..codec.encoder import encode_bytes

        return encode_bytes(self.items)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> SLP:
        """Decode an SLP value from an in-memory stream."""
        from ..codec.decoder import decode_bytes

        return decode_bytes(data)

    def into_inner(self) -> list[bytes]:
        """Take the item list out of this value.

        The value is left holding an empty list, so the returned list is owned
        solely by the caller.
        """
        items = self.items
        self.items = []
        return items
