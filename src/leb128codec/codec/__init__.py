"""LEB128 codecs for leb128codec.

Two stateless codec modules share one chunk scanner:

- ``unsigned``: 0 .. 2**128 - 1
- ``signed``: -2**127 .. 2**127 - 1

Each exposes encoded_byte_count, try_encode, encode, write, try_decode,
decode, decode_with_count and read.
"""

from __future__ import annotations

from . import signed, unsigned
from .chunks import Scan, scan

__all__ = [
    "signed",
    "unsigned",
    "Scan",
    "scan",
]
