"""Record size calculation utilities.

This module provides functions to calculate the encoded size of records
without actually encoding them or looking at their values.
"""

from __future__ import annotations

from .. import varu64
from ..codec.inference import has_implied_length


def header_size(type_: int, length: int) -> int:
    """Calculate the size of a record header in bytes.

    The header is the type field, plus the length field for types >= 128.

    Args:
        type_: Record type
        length: Value length in bytes

    Returns:
        Header size in bytes

    Raises:
        ValueError: If type_ or length is outside the unsigned 64-bit range

    Example:
        >>> header_size(0, 1)
        1
        >>> header_size(128, 10)
        2
        >>> header_size(300, 1000)
        6
    """
    size = varu64.encoding_length(type_)
    if not has_implied_length(type_):
        size += varu64.encoding_length(length)
    return size


def encoded_size(type_: int, length: int) -> int:
    """Calculate the on-wire size of a record in bytes.

    Args:
        type_: Record type
        length: Value length in bytes

    Returns:
        Header size plus value length

    Example:
        >>> encoded_size(16, 4)
        5
    """
    return header_size(type_, length) + length
