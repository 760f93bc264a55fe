"""Main CLI entry point for leb128codec."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .. import __version__
from ..exceptions import Leb128Error
from .describe import describe_decoding, describe_encoding, parse_hex, parse_value


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the leb128codec CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="leb128codec: LEB128 variable-length integer codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  leb128codec --encode 624485               Encode as unsigned LEB128
  leb128codec --encode -65 --signed         Encode as signed LEB128
  leb128codec --decode "e5 8e 26"           Decode unsigned LEB128 bytes
  leb128codec --version                     Show version
        """,
    )

    parser.add_argument(
        "--encode",
        metavar="VALUE",
        type=str,
        help="Encode an integer (decimal or 0x/0o/0b literal)",
    )

    parser.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode hex bytes and show the value and its size class",
    )

    parser.add_argument(
        "--signed",
        action="store_true",
        help="Use signed (two's-complement) LEB128 instead of unsigned",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"leb128codec {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Handle --encode
    if args.encode is not None:
        try:
            describe_encoding(parse_value(args.encode), signed=args.signed)
            return 0
        except ValueError as e:
            print(f"Error: invalid integer {args.encode!r}: {e}", file=sys.stderr)
            return 1
        except Leb128Error as e:
            print(f"Error encoding value: {e}", file=sys.stderr)
            return 1

    # Handle --decode
    if args.decode is not None:
        try:
            describe_decoding(parse_hex(args.decode), signed=args.signed)
            return 0
        except ValueError as e:
            print(f"Error: invalid hex {args.decode!r}: {e}", file=sys.stderr)
            return 1
        except Leb128Error as e:
            print(f"Error decoding bytes: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
