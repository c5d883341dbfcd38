"""Property-based tests using hypothesis."""

from __future__ import annotations

import io

from hypothesis import given
from hypothesis import strategies as st

from conftest import TrickleSource
from ssbslp import SLP, decode, decode_bytes, encode_bytes, encoded_size, iter_decode

item_lists = st.lists(st.binary(min_size=0, max_size=300), max_size=20)


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(items=item_lists)
    def test_encode_decode_roundtrip(self, items: list[bytes]) -> None:
        """Test decode(encode(items)) == items."""
        assert decode_bytes(encode_bytes(items)).items == items

    @given(items=item_lists)
    def test_size_matches(self, items: list[bytes]) -> None:
        """Test encoded size is items plus two bytes each."""
        data = encode_bytes(items)
        assert len(data) == encoded_size(items) == sum(len(i) for i in items) + 2 * len(items)

    @given(items=item_lists)
    def test_concatenation(self, items: list[bytes]) -> None:
        """Test encoding is the concatenation of per-item encodings."""
        assert encode_bytes(items) == b"".join(encode_bytes([i]) for i in items)

    @given(items=item_lists)
    def test_trickle_source_roundtrip(self, items: list[bytes]) -> None:
        """Test one-byte reads give the same result as buffered reads."""
        assert decode(TrickleSource(encode_bytes(items))).items == items

    @given(items=item_lists)
    def test_iter_decode_matches_decode(self, items: list[bytes]) -> None:
        """Test lazy and eager decoding agree."""
        data = encode_bytes(items)
        assert list(iter_decode(io.BytesIO(data))) == list(SLP.from_bytes(data))
