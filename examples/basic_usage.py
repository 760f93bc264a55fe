#!/usr/bin/env python3
"""Basic usage example for leb128codec.

This example demonstrates:
1. Encoding unsigned and signed values
2. Zero-allocation encoding into a caller-owned buffer
3. Decoding several values back to back from one buffer
4. Size classification and checked narrowing
5. Handling malformed input
"""

from __future__ import annotations

import io

from leb128codec import (
    UINT128_MAX,
    IncompleteInputError,
    Leb128OverflowError,
    NarrowingError,
    signed,
    unsigned,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("leb128codec Basic Usage Example")
    print("=" * 60)
    print()

    # Encode a few values
    print("1. Encoding values...")
    for value in (0, 127, 128, 624485, UINT128_MAX):
        data = unsigned.encode(value)
        print(f"   unsigned {value}: {data.hex(' ')} ({len(data)} bytes)")
    for value in (-1, 64, -65):
        data = signed.encode(value)
        print(f"   signed {value}: {data.hex(' ')} ({len(data)} bytes)")
    print()

    # Encode into a fixed buffer
    print("2. Encoding into a fixed buffer...")
    buffer = bytearray(4)
    success, written = unsigned.try_encode(624485, buffer)
    print(f"   try_encode(624485) -> success={success}, written={written}")
    success, written = unsigned.try_encode(UINT128_MAX, buffer)
    print(f"   try_encode(UINT128_MAX) -> success={success}, written={written}")
    print()

    # Decode back to back
    print("3. Decoding a packed buffer...")
    values = [3, -200, 70000, -(2**40)]
    packed = b"".join(signed.encode(v) for v in values)
    print(f"   Packed: {packed.hex(' ')}")

    offset = 0
    while offset < len(packed):
        info, consumed = signed.decode_with_count(packed, offset)
        print(f"   @{offset}: {info.value} ({consumed} bytes, {info.size_class().bits}-bit)")
        offset += consumed
    print()

    # Narrowing
    print("4. Checked narrowing...")
    info = unsigned.decode(b"\xe5\x8e\x26")
    print(f"   as_int32() = {info.as_int32()}")
    try:
        info.as_byte()
    except NarrowingError as e:
        print(f"   as_byte() failed: {e}")
    print()

    # Streams and errors
    print("5. Streams and malformed input...")
    stream = io.BytesIO()
    unsigned.write(300, stream)
    stream.seek(0)
    print(f"   Read from stream: {unsigned.read(stream).value}")

    for bad in (b"\x80\x80", b"\x80" * 19):
        try:
            unsigned.decode(bad)
        except IncompleteInputError as e:
            print(f"   {bad.hex()}: incomplete ({e})")
        except Leb128OverflowError as e:
            print(f"   {bad.hex()}: overflow ({e})")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
