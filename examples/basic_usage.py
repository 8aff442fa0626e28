"""Basic usage example for ctlv.

Builds a small stream of records, then reads it back with a reader that only
understands some of the types and skips the rest.
"""

from __future__ import annotations

from ctlv import Ctlv, DecodeError, encode_record, implied_length, scan

# Types the reader knows about
DEPTH_CM = 16  # implied 4-byte value
STATUS_TEXT = 500  # explicit length


def build_stream() -> bytes:
    """Encode a mix of known and unknown records."""
    return b"".join(
        [
            encode_record(DEPTH_CM, (1500).to_bytes(4, "big")),
            encode_record(3, b"\x07"),  # unknown, 1-byte class
            encode_record(STATUS_TEXT, b"surfacing"),
            encode_record(77_000, b"vendor blob"),  # unknown, explicit length
        ]
    )


def main() -> None:
    data = build_stream()
    print(f"Stream: {len(data)} bytes")
    print(f"Type {DEPTH_CM} implies {implied_length(DEPTH_CM)} bytes")
    print()

    for header in scan(data):
        if header.type_ == DEPTH_CM:
            print(f"depth = {int.from_bytes(header.value(data), 'big')} cm")
        elif header.type_ == STATUS_TEXT:
            print(f"status = {header.value_bytes(data).decode('utf-8')}")
        else:
            print(f"skipped type {header.type_} ({header.length} bytes)")

    print()
    rec = Ctlv(type_=STATUS_TEXT, value=b"ok")
    print(f"{rec} -> {rec.encode().hex()}")

    # Truncated input: earlier records are still returned
    try:
        for header in scan(data + b"\x80\x10abc"):
            pass
    except DecodeError as e:
        print(f"Stopped at offset {e.offset}: {e}")


if __name__ == "__main__":
    main()
