"""Buffer normalisation helpers."""

from __future__ import annotations

from typing import Any


def byte_view(buf: Any) -> memoryview:
    """Return a flat, unsigned-byte view of any bytes-like object.

    Lengths and indexes on the result count bytes, whatever the item
    format of ``buf`` (e.g. a memoryview over ``array('H')``). The view
    aliases ``buf`` and is writable when ``buf`` is.

    Raises:
        TypeError: If buf does not support the buffer protocol or is not contiguous
    """
    view = memoryview(buf)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view
