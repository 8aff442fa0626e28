"""Utility functions for ctlv.

This module provides record size calculation and buffer helpers.
"""

from __future__ import annotations

from .buffers import byte_view
from .sizing import encoded_size, header_size

__all__ = [
    "byte_view",
    "encoded_size",
    "header_size",
]
