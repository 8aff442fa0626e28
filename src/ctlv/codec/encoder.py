"""Record encoder.

This module provides encode_record() and encode_record_into(), which turn a
(type, value) pair into its compact type-length-value wire form.
"""

from __future__ import annotations

from .. import varu64
from ..exceptions import EncodeError, LengthMismatch
from ..utils.buffers import byte_view
from ..utils.sizing import encoded_size
from .inference import has_implied_length, implied_length

BytesLike = bytes | bytearray | memoryview


def _check_record(type_: int, value: BytesLike) -> None:
    """Validate a (type, value) pair before anything is written.

    Raises:
        EncodeError: If the type is outside the unsigned 64-bit range
        LengthMismatch: If a compact type is paired with a wrongly sized value
    """
    if not isinstance(type_, int) or isinstance(type_, bool):
        raise EncodeError(f"Record type must be an int, got {type(type_).__name__}")
    if type_ < 0 or type_ > varu64.U64_MAX:
        raise EncodeError(f"Record type {type_} out of bounds [0, {varu64.U64_MAX}]")

    if has_implied_length(type_):
        expected = implied_length(type_)
        if len(value) != expected:
            raise LengthMismatch(type_, expected, len(value))


def encode_record(type_: int, value: BytesLike) -> bytes:
    """Encode a single record.

    Types below 128 are written as ``type || value``; all other types as
    ``type || length || value``. No padding or trailing bytes are added.

    Args:
        type_: Record type (0 to 2**64 - 1)
        value: Value bytes

    Returns:
        Encoded record

    Raises:
        EncodeError: If the type is out of range
        LengthMismatch: If type_ < 128 and len(value) != 2 ** (type_ >> 3)

    Examples:
        ```python
        from ctlv import encode_record

        encode_record(0, b"\\x2a")          # b'\\x00*'
        encode_record(200, b"hello")        # b'\\xc8\\x05hello'
        ```
    """
    value = byte_view(value)
    _check_record(type_, value)

    result = bytearray(varu64.encode(type_))
    if not has_implied_length(type_):
        result.extend(varu64.encode(len(value)))
    result.extend(value)

    return bytes(result)


def encode_record_into(
    out: bytearray | memoryview, offset: int, type_: int, value: BytesLike
) -> int:
    """Encode a single record directly into a preallocated buffer.

    Args:
        out: Writable buffer
        offset: Position at which the record starts
        type_: Record type
        value: Value bytes

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If the type is out of range or out is too small
            (nothing is written in that case)
        LengthMismatch: If a compact type is paired with a wrongly sized value
    """
    value = byte_view(value)
    out = byte_view(out)
    _check_record(type_, value)

    total = encoded_size(type_, len(value))
    if offset < 0 or offset + total > len(out):
        raise EncodeError(
            f"Output buffer too small: record needs {total} bytes at offset {offset}, "
            f"buffer has {len(out)} bytes"
        )

    position = offset + varu64.encode_into(type_, out, offset)
    if not has_implied_length(type_):
        position += varu64.encode_into(len(value), out, position)
    out[position : position + len(value)] = value

    return position + len(value) - offset
