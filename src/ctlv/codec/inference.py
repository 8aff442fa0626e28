"""Length inference for compact record types.

Types below 128 carry their value length implicitly: ``type >> 3`` picks one
of 16 power-of-two length classes (1 to 32768 bytes) and ``type & 0x7`` picks
one of 8 free slots within the class. All other types are followed by an
explicit varu64 length.
"""

from __future__ import annotations

IMPLIED_TYPE_LIMIT = 128
LENGTH_CLASSES = 16
SLOTS_PER_CLASS = 8


def has_implied_length(type_: int) -> bool:
    """Return True if records of this type carry no explicit length field."""
    return 0 <= type_ < IMPLIED_TYPE_LIMIT


def implied_length(type_: int) -> int:
    """Return the value length implied by a compact type.

    Args:
        type_: Record type in [0, 128)

    Returns:
        ``2 ** (type_ >> 3)``

    Raises:
        ValueError: If the type has an explicit length

    Example:
        >>> implied_length(8), implied_length(15), implied_length(16)
        (2, 2, 4)
    """
    if not has_implied_length(type_):
        raise ValueError(f"Type {type_} has no implied length (must be 0-127)")
    return 1 << (type_ >> 3)


def length_class(type_: int) -> tuple[int, int]:
    """Split a compact type into its (length class, slot) pair."""
    if not has_implied_length(type_):
        raise ValueError(f"Type {type_} has no length class (must be 0-127)")
    return type_ >> 3, type_ & (SLOTS_PER_CLASS - 1)
