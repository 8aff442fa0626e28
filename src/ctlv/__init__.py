"""ctlv: Compact Type-Length-Value Codec

A Python library for the ctlv binary envelope format. Every record carries a
type, a length and a value. Types below 128 imply their length
(``2 ** (type >> 3)`` bytes), all other types carry an explicit varu64 length.
A reader that does not know a type can therefore always skip its record.

Inspired by: https://github.com/AljoschaMeyer/ctlv

Key Features:
- Header codec with implied lengths for compact types
- Forward-only scanner that skips unknown types
- Zero-copy value views over the input buffer
- Canonical varu64 integer codec

Quick Start:
    >>> from ctlv import encode_record, scan
    >>>
    >>> data = encode_record(0, b"\\x01") + encode_record(4242, b"opaque payload")
    >>> for header in scan(data):
    ...     print(header.type_, header.length)
    0 1
    4242 14
"""

from __future__ import annotations

from . import varu64
from .codec import (
    RecordHeader,
    Scanner,
    decode_record,
    encode_record,
    encode_record_into,
    has_implied_length,
    implied_length,
    length_class,
    scan,
)
from .exceptions import (
    CtlvError,
    DecodeError,
    EncodeError,
    Field,
    LengthMismatch,
    MalformedInteger,
    TruncatedValue,
)
from .models import Ctlv
from .utils import encoded_size, header_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode_record",
    "encode_record_into",
    "decode_record",
    "scan",
    "Scanner",
    "RecordHeader",
    "Ctlv",
    # Length inference
    "implied_length",
    "has_implied_length",
    "length_class",
    # Sizing
    "encoded_size",
    "header_size",
    # Exceptions
    "CtlvError",
    "EncodeError",
    "DecodeError",
    "LengthMismatch",
    "MalformedInteger",
    "TruncatedValue",
    "Field",
    # Integer codec
    "varu64",
    # Version
    "__version__",
]
