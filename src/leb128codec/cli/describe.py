"""Encode/decode reporting for the CLI."""

from __future__ import annotations

import re
from types import ModuleType

from ..codec import signed as signed_codec
from ..codec import unsigned as unsigned_codec

_SEPARATORS = re.compile(r"[\s:,_-]")


def parse_value(text: str) -> int:
    """Parse a decimal, 0x-hex, 0o-octal or 0b-binary integer literal.

    Raises:
        ValueError: If text is not an integer literal
    """
    return int(text.strip(), 0)


def parse_hex(text: str) -> bytes:
    """Parse hex bytes such as ``e5 8e 26``, ``E5:8E:26`` or ``0xe58e26``.

    Raises:
        ValueError: If text is not an even-length hex string
    """
    cleaned = _SEPARATORS.sub("", text)
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    return bytes.fromhex(cleaned)


def format_hex(data: bytes) -> str:
    """Format bytes as space-separated lowercase hex pairs."""
    return " ".join(f"{byte:02x}" for byte in data)


def _codec(signed: bool) -> ModuleType:
    return signed_codec if signed else unsigned_codec


def describe_encoding(value: int, signed: bool = False) -> None:
    """Print the LEB128 encoding of a value.

    Args:
        value: Integer to encode
        signed: Use the signed codec instead of the unsigned one
    """
    data = bytes(_codec(signed).encode(value))
    print(f"{format_hex(data)}  ({len(data)} byte{'s' if len(data) != 1 else ''})")


def describe_decoding(data: bytes, signed: bool = False) -> None:
    """Decode the first LEB128 value in ``data`` and print a breakdown.

    Args:
        data: Encoded bytes; anything after the first value is reported as trailing
        signed: Use the signed codec instead of the unsigned one
    """
    info, consumed = _codec(signed).decode_with_count(data)
    size = info.size_class()

    print(f"value{'.' * 14}{info.value}")
    print(f"hex{'.' * 16}{info.value:#x}")
    print(f"codec{'.' * 14}{'signed' if signed else 'unsigned'}")
    print(f"bytes consumed{'.' * 5}{consumed} of {len(data)}")
    print(f"size class{'.' * 9}{size.bits}-bit ({size.name})")

    if consumed < len(data):
        print(f"trailing bytes{'.' * 5}{format_hex(data[consumed:])}")
