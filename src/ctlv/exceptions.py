"""Exception hierarchy for ctlv.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from CtlvError for easy catching of any ctlv-specific error.
"""

from __future__ import annotations

import enum


class Field(enum.Enum):
    """Header field in which a malformed integer was found."""

    TYPE = "type"
    LENGTH = "length"


class CtlvError(Exception):
    """Base exception for all ctlv errors."""

    pass


class EncodeError(CtlvError):
    """Raised when encoding a record fails.

    Examples:
        - Type outside the unsigned 64-bit range
        - Output buffer too small for the encoding
        - Value length disagrees with the implied length (LengthMismatch)
    """

    pass


class LengthMismatch(EncodeError):
    """Raised when a compact type is paired with a value of the wrong size.

    Types below 128 imply their length, so the value must have exactly
    ``2 ** (type >> 3)`` bytes.
    """

    def __init__(self, type_: int, expected: int, actual: int) -> None:
        self.type_ = type_
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Type {type_} implies a {expected}-byte value, got {actual} bytes"
        )


class DecodeError(CtlvError):
    """Raised when decoding binary data fails.

    Examples:
        - Malformed or truncated varu64 in the type or length field
        - Fewer value bytes left in the buffer than the header declares

    Attributes:
        offset: Buffer position of the record (or integer) being decoded
    """

    def __init__(self, message: str, offset: int = 0) -> None:
        self.offset = offset
        super().__init__(message)


class MalformedInteger(DecodeError):
    """Raised when the bytes at a position are not a valid varu64.

    Attributes:
        reason: ``"non_canonical"`` or ``"end_of_input"``
        field: Header field being decoded, or None when raised by varu64 itself
        consumed: Number of bytes examined before the failure was detected
    """

    NON_CANONICAL = "non_canonical"
    END_OF_INPUT = "end_of_input"

    def __init__(
        self,
        reason: str,
        offset: int = 0,
        *,
        field: Field | None = None,
        consumed: int = 0,
    ) -> None:
        self.reason = reason
        self.field = field
        self.consumed = consumed
        where = f" in {field.value} field" if field is not None else ""
        detail = (
            "non-canonical encoding"
            if reason == self.NON_CANONICAL
            else "unexpected end of input"
        )
        super().__init__(f"Malformed varu64{where} at offset {offset}: {detail}", offset)

    def with_field(self, field: Field) -> MalformedInteger:
        """Return a copy of this error tagged with the header field."""
        return MalformedInteger(self.reason, self.offset, field=field, consumed=self.consumed)


class TruncatedValue(DecodeError):
    """Raised when a well-formed header declares more bytes than remain.

    Attributes:
        type_: Decoded record type
        length: Declared value length
        needed: Bytes required from the value start to the end of the value
        available: Bytes actually left in the buffer after the header
    """

    def __init__(self, type_: int, length: int, offset: int, available: int) -> None:
        self.type_ = type_
        self.length = length
        self.needed = length
        self.available = available
        super().__init__(
            f"Truncated value for type {type_} at offset {offset}: "
            f"need {length} bytes, {available} available",
            offset,
        )
