"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from ctlv import encode_record


@pytest.fixture
def mixed_records() -> list[tuple[int, bytes]]:
    """Records covering implied and explicit lengths."""
    return [
        (0, b"\x2a"),
        (8, b"hi"),
        (23, b"ABCD"),
        (128, b""),
        (200, b"hello"),
        (300, b"x" * 300),
        (2**40, b"far type"),
    ]


@pytest.fixture
def mixed_stream(mixed_records: list[tuple[int, bytes]]) -> bytes:
    """The mixed records encoded back to back."""
    return b"".join(encode_record(t, v) for t, v in mixed_records)
