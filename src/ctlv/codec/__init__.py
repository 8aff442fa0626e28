"""Compact type-length-value codec.

This module provides record encoding, single-record decoding, and the
forward-only scanner that skips records of any type.
"""

from __future__ import annotations

from .decoder import RecordHeader, decode_record
from .encoder import encode_record, encode_record_into
from .inference import has_implied_length, implied_length, length_class
from .scanner import Scanner, scan

__all__ = [
    "encode_record",
    "encode_record_into",
    "decode_record",
    "scan",
    "Scanner",
    "RecordHeader",
    "implied_length",
    "has_implied_length",
    "length_class",
]
