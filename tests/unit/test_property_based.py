"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from ctlv import DecodeError, decode_record, encode_record, scan, varu64

# Classes above 9 (512 bytes) are covered by the unit tests
compact_records = st.integers(min_value=0, max_value=79).flatmap(
    lambda t: st.binary(min_size=1 << (t >> 3), max_size=1 << (t >> 3)).map(lambda v: (t, v))
)
explicit_records = st.tuples(
    st.integers(min_value=128, max_value=varu64.U64_MAX),
    st.binary(min_size=0, max_size=300),
)
records = st.one_of(compact_records, explicit_records)


class TestVarU64Properties:
    """Property-based tests for the integer codec."""

    @given(n=st.integers(min_value=0, max_value=varu64.U64_MAX))
    def test_roundtrip(self, n: int) -> None:
        """Test decode(encode(n)) returns n and the full length."""
        encoded = varu64.encode(n)
        assert varu64.decode(encoded) == (n, len(encoded))
        assert varu64.encoding_length(n) == len(encoded)

    @given(n=st.integers(min_value=0, max_value=varu64.U64_MAX), tail=st.binary(max_size=10))
    def test_self_delimiting(self, n: int, tail: bytes) -> None:
        """Test that trailing bytes do not affect decoding."""
        encoded = varu64.encode(n)
        assert varu64.decode(encoded + tail) == (n, len(encoded))


class TestCodecProperties:
    """Property-based tests for record encoding/decoding."""

    @given(record=compact_records)
    def test_compact_roundtrip(self, record: tuple[int, bytes]) -> None:
        """Test round-trip for types with implied lengths."""
        type_, value = record
        data = encode_record(type_, value)
        header, next_offset = decode_record(data)

        assert (header.type_, header.length, header.value_bytes(data)) == (
            type_,
            len(value),
            value,
        )
        assert next_offset == len(data)

    @given(record=explicit_records)
    def test_explicit_roundtrip(self, record: tuple[int, bytes]) -> None:
        """Test round-trip for types with explicit lengths."""
        type_, value = record
        data = encode_record(type_, value)
        header, next_offset = decode_record(data)

        assert (header.type_, header.length, header.value_bytes(data)) == (
            type_,
            len(value),
            value,
        )
        assert next_offset == len(data)

    @given(data=st.binary(max_size=64))
    def test_decoded_prefix_reencodes(self, data: bytes) -> None:
        """Test that any successfully decoded prefix re-encodes to the same bytes."""
        try:
            header, next_offset = decode_record(data)
        except DecodeError:
            return

        assert encode_record(header.type_, header.value_bytes(data)) == data[:next_offset]


class TestScanProperties:
    """Property-based tests for the scanner."""

    @given(items=st.lists(records, max_size=10))
    def test_skip_without_understanding(self, items: list[tuple[int, bytes]]) -> None:
        """Test that N records scan to N headers covering the whole buffer."""
        data = b"".join(encode_record(t, v) for t, v in items)
        headers = list(scan(data))

        assert len(headers) == len(items)
        assert sum(h.encoded_length for h in headers) == len(data)
        assert [h.type_ for h in headers] == [t for t, _ in items]

    @given(data=st.binary(max_size=128))
    def test_idempotent(self, data: bytes) -> None:
        """Test that scanning arbitrary bytes twice gives the same result."""

        def collect() -> tuple[list[tuple[int, int, int]], str | None]:
            seen = []
            try:
                for h in scan(data):
                    seen.append((h.type_, h.length, h.offset))
            except DecodeError as e:
                return seen, str(e)
            return seen, None

        assert collect() == collect()
