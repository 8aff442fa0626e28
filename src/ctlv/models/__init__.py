"""Record models for ctlv."""

from __future__ import annotations

from .record import Ctlv

__all__ = [
    "Ctlv",
]
