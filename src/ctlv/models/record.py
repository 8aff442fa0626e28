"""Owned record model.

This module provides the Ctlv class, an immutable (type, value) pair that owns
its value bytes. Its length is always derived from the value, and compact
types are checked against their implied length when the record is built.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBytes, StrictInt, field_validator, model_validator

from .. import varu64
from ..codec.decoder import RecordHeader, decode_record
from ..codec.encoder import encode_record, encode_record_into
from ..codec.inference import has_implied_length, implied_length
from ..exceptions import LengthMismatch
from ..utils.sizing import encoded_size


class Ctlv(BaseModel):
    """A type-length-value record that owns its value.

    Example:
        >>> rec = Ctlv(type_=16, value=b"\\x00\\x01\\x02\\x03")
        >>> rec.encode()
        b'\\x10\\x00\\x01\\x02\\x03'
        >>> Ctlv.decode(rec.encode())
        (Ctlv(type_=16, value=b'\\x00\\x01\\x02\\x03'), 5)

    Attributes:
        type_: Record type (0 to 2**64 - 1)
        value: Value bytes
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    type_: StrictInt
    value: StrictBytes

    @field_validator("type_")
    @classmethod
    def check_type(cls, v: int) -> int:
        if v < 0 or v > varu64.U64_MAX:
            raise ValueError(f"type_ must be 0-{varu64.U64_MAX}, got {v}")
        return v

    @field_validator("value", mode="before")
    @classmethod
    def copy_buffer(cls, v: Any) -> Any:
        # memoryview/bytearray inputs are copied so the record never aliases them
        if isinstance(v, (bytearray, memoryview)):
            return bytes(v)
        return v

    @model_validator(mode="after")
    def check_implied_length(self) -> Ctlv:
        if has_implied_length(self.type_):
            expected = implied_length(self.type_)
            if len(self.value) != expected:
                raise LengthMismatch(self.type_, expected, len(self.value))
        return self

    @property
    def length(self) -> int:
        return len(self.value)

    def encoding_length(self) -> int:
        """Return how many bytes encode() will produce."""
        return encoded_size(self.type_, self.length)

    def encode(self) -> bytes:
        """Encode this record to its wire form."""
        return encode_record(self.type_, self.value)

    def encode_into(self, out: bytearray | memoryview, offset: int = 0) -> int:
        """Encode this record into ``out`` and return the number of bytes written."""
        return encode_record_into(out, offset, self.type_, self.value)

    @classmethod
    def from_header(cls, header: RecordHeader, buf: bytes | bytearray | memoryview) -> Ctlv:
        """Build an owned record from a decoded header and its buffer."""
        return cls(type_=header.type_, value=header.value_bytes(buf))

    @classmethod
    def decode(
        cls, buf: bytes | bytearray | memoryview, offset: int = 0
    ) -> tuple[Ctlv, int]:
        """Decode one record and copy its value.

        Returns:
            Tuple of (record, next_offset)

        Raises:
            MalformedInteger: If the type or length field is invalid
            TruncatedValue: If the buffer ends inside the value
        """
        header, next_offset = decode_record(buf, offset)
        return cls.from_header(header, buf), next_offset
