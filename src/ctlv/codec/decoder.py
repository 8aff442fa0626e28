"""Record decoder.

This module provides decode_record(), which reads one record header from a
buffer and locates its value without touching any value byte.
"""

from __future__ import annotations

from dataclasses import dataclass

from .. import varu64
from ..exceptions import Field, MalformedInteger, TruncatedValue
from ..utils.buffers import byte_view
from .inference import has_implied_length, implied_length


@dataclass(frozen=True)
class RecordHeader:
    """Position and shape of one record inside a buffer.

    The header does not hold the value. Use value() for a zero-copy view or
    value_bytes() for a copy. Views alias the buffer they were taken from:
    the buffer must stay alive and unmodified for as long as any view is used.

    Attributes:
        type_: Record type
        length: Value length in bytes (implied or explicit)
        offset: Position of the first header byte
        value_start: Position of the first value byte
    """

    type_: int
    length: int
    offset: int
    value_start: int

    @property
    def value_end(self) -> int:
        return self.value_start + self.length

    @property
    def value_range(self) -> range:
        return range(self.value_start, self.value_end)

    @property
    def next_offset(self) -> int:
        return self.value_end

    @property
    def header_length(self) -> int:
        return self.value_start - self.offset

    @property
    def encoded_length(self) -> int:
        return self.value_end - self.offset

    @property
    def implied(self) -> bool:
        """True if the length was derived from the type."""
        return has_implied_length(self.type_)

    def value(self, buf: bytes | bytearray | memoryview) -> memoryview:
        """Return a view of this record's value in ``buf``.

        The view is writable when ``buf`` is a bytearray.
        """
        return byte_view(buf)[self.value_start : self.value_end]

    def value_bytes(self, buf: bytes | bytearray | memoryview) -> bytes:
        """Return a copy of this record's value."""
        return bytes(byte_view(buf)[self.value_start : self.value_end])


def decode_record(
    buf: bytes | bytearray | memoryview, offset: int = 0
) -> tuple[RecordHeader, int]:
    """Decode the record header starting at ``offset``.

    Args:
        buf: Buffer holding one or more encoded records
        offset: Position of the record's first byte

    Returns:
        Tuple of (RecordHeader, next_offset)

    Raises:
        MalformedInteger: If the type or length field is not a valid varu64
            (``field`` tells which)
        TruncatedValue: If fewer than ``length`` bytes follow the header
        ValueError: If offset is negative or beyond the end of buf

    Examples:
        ```python
        from ctlv import decode_record

        header, next_offset = decode_record(b"\\xc8\\x05hello")
        header.type_, header.length, next_offset   # (200, 5, 7)
        ```
    """
    buf = byte_view(buf)
    if offset < 0 or offset > len(buf):
        raise ValueError(f"offset {offset} outside buffer of {len(buf)} bytes")

    try:
        type_, type_size = varu64.decode(buf, offset)
    except MalformedInteger as e:
        raise e.with_field(Field.TYPE) from e

    header_end = offset + type_size
    if has_implied_length(type_):
        length = implied_length(type_)
    else:
        try:
            length, length_size = varu64.decode(buf, header_end)
        except MalformedInteger as e:
            raise e.with_field(Field.LENGTH) from e
        header_end += length_size

    available = len(buf) - header_end
    if length > available:
        raise TruncatedValue(type_, length, offset, available)

    header = RecordHeader(type_=type_, length=length, offset=offset, value_start=header_end)
    return header, header.next_offset
