"""Record inspection CLI command."""

from __future__ import annotations

from ..codec.decoder import RecordHeader
from ..codec.inference import length_class
from ..codec.scanner import scan
from ..exceptions import DecodeError


def describe_header(index: int, header: RecordHeader) -> str:
    """Format one record header as a report line."""
    if header.implied:
        cls, slot = length_class(header.type_)
        kind = f"class {cls} slot {slot}"
    else:
        kind = "explicit"

    desc = f"{index}. @{header.offset} type {header.type_}"
    info = f"{header.length} bytes ({kind}) -> {header.next_offset}"
    dots = "." * max(1, 54 - len(desc) - len(info))
    return f"        {desc}{dots}{info}"


def inspect_buffer(data: bytes, source: str) -> bool:
    """Scan a buffer and print one line per record.

    Args:
        data: Buffer of concatenated records
        source: Name shown in the report header

    Returns:
        True if the whole buffer decoded, False if scanning stopped on an error
    """
    print("|" * 7, "ctlv: Compact Type-Length-Value Codec", "|" * 7)
    print(f"{source}: {len(data)} bytes")
    print()

    scanner = scan(data)
    count = 0
    implied = 0
    error: DecodeError | None = None
    try:
        for header in scanner:
            print(describe_header(count, header))
            count += 1
            if header.implied:
                implied += 1
    except DecodeError as e:
        error = e

    print()
    print(f"{'=' * 24} Summary {'=' * 24}")
    print(
        f"{count} record{'s' if count != 1 else ''} "
        f"({implied} implied, {count - implied} explicit)"
    )
    print(f"Consumed {scanner.offset} of {len(data)} bytes")

    if error is not None:
        print(f"Error: {error}")
        return False
    return True
