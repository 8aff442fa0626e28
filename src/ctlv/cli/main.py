"""Main CLI entry point for ctlv."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.report import inspect_buffer


def main() -> int:
    """Main entry point for the ctlv CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="ctlv: Compact Type-Length-Value Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ctlv --scan records.bin               List the records in a file
  ctlv --hex "00 2a c8 02 68 69"         List the records in a hex string
  ctlv --version                         Show version
        """,
    )

    parser.add_argument(
        "--scan",
        metavar="FILE",
        type=str,
        help="Scan a file of concatenated records and list their headers",
    )

    parser.add_argument(
        "--hex",
        metavar="HEX",
        type=str,
        help="Scan records given as a hex string",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ctlv {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.scan is not None:
        file_path = Path(args.scan)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            data = file_path.read_bytes()
        except OSError as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1

        return 0 if inspect_buffer(data, str(file_path)) else 1

    if args.hex is not None:
        try:
            data = bytes.fromhex(args.hex)
        except ValueError as e:
            print(f"Error: Invalid hex input: {e}", file=sys.stderr)
            return 1

        return 0 if inspect_buffer(data, "<hex>") else 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
