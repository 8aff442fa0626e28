"""VarU64: canonical variable-length encoding of unsigned 64-bit integers.

A first byte below 248 is the value itself. A first byte ``247 + k``
(``k`` in 1..8) is followed by ``k`` big-endian bytes holding the value.
Only the shortest encoding of a value is accepted, so every integer has
exactly one valid byte sequence.

Example:
    >>> encode(300)
    b'\\xf9\\x01,'
    >>> decode(b"\\xf9\\x01,")
    (300, 3)
"""

from __future__ import annotations

from .exceptions import MalformedInteger

U64_MAX = (1 << 64) - 1

# First byte values below this are single-byte encodings
SINGLE_BYTE_LIMIT = 248


def _as_bytes(buf: bytes | bytearray | memoryview) -> bytes | bytearray | memoryview:
    # Index by byte, not by item, for memoryviews over wider formats
    if isinstance(buf, memoryview) and (buf.format != "B" or buf.ndim != 1):
        return buf.cast("B")
    return buf


def _check_range(n: int) -> None:
    if n < 0:
        raise ValueError(f"varu64 requires non-negative value, got {n}")
    if n > U64_MAX:
        raise ValueError(f"Value {n} does not fit in 64 bits")


def _additional_bytes(n: int) -> int:
    """Return how many bytes follow the tag byte for ``n``."""
    if n < SINGLE_BYTE_LIMIT:
        return 0
    return max(1, (n.bit_length() + 7) // 8)


def encoding_length(n: int) -> int:
    """Return the size in bytes of the canonical encoding of ``n``.

    Raises:
        ValueError: If n is negative or exceeds 2**64 - 1
    """
    _check_range(n)
    return 1 + _additional_bytes(n)


def encode(n: int) -> bytes:
    """Encode ``n`` using the minimal number of bytes.

    Args:
        n: Unsigned integer (0 to 2**64 - 1)

    Returns:
        Canonical varu64 encoding

    Raises:
        ValueError: If n is negative or exceeds 2**64 - 1
    """
    _check_range(n)
    extra = _additional_bytes(n)
    if extra == 0:
        return bytes((n,))
    return bytes((SINGLE_BYTE_LIMIT - 1 + extra,)) + n.to_bytes(extra, "big")


def encode_into(n: int, out: bytearray | memoryview, offset: int = 0) -> int:
    """Write the encoding of ``n`` into ``out`` at ``offset``.

    Returns:
        Number of bytes written

    Raises:
        ValueError: If n is out of range or out has no room for the encoding
    """
    out = _as_bytes(out)
    encoded = encode(n)
    end = offset + len(encoded)
    if offset < 0 or end > len(out):
        raise ValueError(
            f"Buffer too small: need {len(encoded)} bytes at offset {offset}, "
            f"buffer has {len(out)} bytes"
        )
    out[offset:end] = encoded
    return len(encoded)


def decode(buf: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int]:
    """Decode one varu64 starting at ``offset``.

    Args:
        buf: Buffer to read from
        offset: Position of the tag byte

    Returns:
        Tuple of (value, bytes_consumed)

    Raises:
        MalformedInteger: If the input ends early or the encoding is not canonical
        ValueError: If offset is negative
    """
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")

    buf = _as_bytes(buf)
    available = len(buf) - offset
    if available <= 0:
        raise MalformedInteger(MalformedInteger.END_OF_INPUT, offset)

    tag = buf[offset]
    if tag < SINGLE_BYTE_LIMIT:
        return tag, 1

    extra = tag - (SINGLE_BYTE_LIMIT - 1)
    if available < 1 + extra:
        raise MalformedInteger(MalformedInteger.END_OF_INPUT, offset, consumed=available)

    value = int.from_bytes(buf[offset + 1 : offset + 1 + extra], "big")

    # Reject anything a shorter encoding could have represented
    if extra == 1:
        minimum = SINGLE_BYTE_LIMIT
    else:
        minimum = 1 << (8 * (extra - 1))
    if value < minimum:
        raise MalformedInteger(MalformedInteger.NON_CANONICAL, offset, consumed=1 + extra)

    return value, 1 + extra
