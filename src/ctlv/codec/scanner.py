"""Forward-only record scanner.

Walks a buffer of concatenated records using nothing but the header rules,
so records with unknown types are skipped just like known ones.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..exceptions import DecodeError
from ..models.record import Ctlv
from ..utils.buffers import byte_view
from .decoder import RecordHeader, decode_record

logger = logging.getLogger(__name__)


class Scanner:
    """Lazy iterator over the record headers in a buffer.

    Each call to next() decodes one header and moves the cursor to the end of
    that record's value. Iteration stops when the cursor reaches the end of the
    buffer. If a record is malformed or truncated, its DecodeError is raised
    after all earlier records have been yielded, and the scanner is finished
    from then on. To resume from a known-good point, create a new scanner with
    scan(buf, saved_offset).

    The scanner keeps no per-type state, so scanning the same buffer twice
    produces the same headers.

    Example:
        >>> buf = encode_record(0, b"a") + encode_record(999, b"unknown")
        >>> [(h.type_, h.length) for h in Scanner(buf)]
        [(0, 1), (999, 7)]
    """

    def __init__(self, buf: bytes | bytearray | memoryview, offset: int = 0) -> None:
        """Initialize a scanner positioned at ``offset``.

        Args:
            buf: Buffer of concatenated records
            offset: Position of the first record

        Raises:
            ValueError: If offset is outside the buffer
        """
        buf = byte_view(buf)
        if offset < 0 or offset > len(buf):
            raise ValueError(f"offset {offset} outside buffer of {len(buf)} bytes")
        self._buf = buf
        self._offset = offset
        self._done = False
        self._count = 0

    @property
    def buf(self) -> memoryview:
        """Byte view of the scanned buffer."""
        return self._buf

    @property
    def offset(self) -> int:
        """Position of the next record to decode."""
        return self._offset

    def remaining(self) -> int:
        """Return the number of bytes not yet consumed."""
        return len(self._buf) - self._offset

    def __iter__(self) -> Scanner:
        return self

    def __next__(self) -> RecordHeader:
        if self._done:
            raise StopIteration

        if self._offset == len(self._buf):
            self._done = True
            logger.debug("Scan finished: %d records, %d bytes", self._count, self._offset)
            raise StopIteration

        try:
            header, next_offset = decode_record(self._buf, self._offset)
        except DecodeError as e:
            self._done = True
            logger.debug("Scan stopped after %d records: %s", self._count, e)
            raise

        logger.debug(
            "Record %d at offset %d: type=%d length=%d",
            self._count,
            header.offset,
            header.type_,
            header.length,
        )
        self._offset = next_offset
        self._count += 1
        return header

    def views(self) -> Iterator[tuple[RecordHeader, memoryview]]:
        """Yield each header together with a zero-copy view of its value.

        The views alias the scanned buffer; do not modify the buffer while
        they are in use.
        """
        for header in self:
            yield header, header.value(self._buf)

    def records(self) -> Iterator[Ctlv]:
        """Yield each record as an owned Ctlv (value copied)."""
        for header in self:
            yield Ctlv.from_header(header, self._buf)


def scan(buf: bytes | bytearray | memoryview, offset: int = 0) -> Scanner:
    """Scan the records in ``buf``, starting at ``offset``.

    Args:
        buf: Buffer of zero or more concatenated records
        offset: Position of the first record (default 0)

    Returns:
        Scanner yielding a RecordHeader per record

    Examples:
        ```python
        from ctlv import scan

        for header in scan(data):
            if header.type_ == KNOWN_TYPE:
                handle(header.value(data))
            # every other type is skipped without further work
        ```
    """
    return Scanner(buf, offset)
