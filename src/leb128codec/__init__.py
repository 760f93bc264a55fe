"""leb128codec: LEB128 variable-length integer codec

A Python library for Little-Endian Base-128 encoding of unsigned and
two's-complement signed integers up to 128 bits, as used by intermediate
representations, debug-info formats and wire protocols.

Key Features:
- Unsigned (0 .. 2**128 - 1) and signed (-2**127 .. 2**127 - 1) codecs
- Non-raising try_* entry points alongside strict ones with typed errors
- Buffer, bytes and binary-stream sources and destinations
- Size classification of decoded values (8/32/64/128-bit tiers)

Quick Start:
    >>> from leb128codec import signed, unsigned
    >>>
    >>> data = unsigned.encode(624485)
    >>> info = unsigned.decode(data)
    >>> info.value, info.size_class()
    (624485, <SizeClass.BITS32: 32>)
    >>>
    >>> buffer = bytearray(19)
    >>> ok, written = signed.try_encode(-65, buffer)
    >>> bytes(buffer[:written])
    b'\\xbf\\x7f'
"""

from __future__ import annotations

from .codec import signed, unsigned
from .exceptions import (
    BufferTooSmallError,
    DecodeError,
    EncodeError,
    EndOfStreamError,
    FailureKind,
    IncompleteInputError,
    Leb128Error,
    Leb128OverflowError,
    NarrowingError,
    ValueRangeError,
)
from .info import SignedInfo, UnsignedInfo
from .sizes import INT128_MAX, INT128_MIN, MAX_ENCODED_BYTES, UINT128_MAX, SizeClass

__version__ = "0.1.0"

__all__ = [
    # Codecs
    "unsigned",
    "signed",
    # Decode results
    "UnsignedInfo",
    "SignedInfo",
    "SizeClass",
    # Limits
    "UINT128_MAX",
    "INT128_MIN",
    "INT128_MAX",
    "MAX_ENCODED_BYTES",
    # Exceptions
    "Leb128Error",
    "FailureKind",
    "EncodeError",
    "BufferTooSmallError",
    "ValueRangeError",
    "DecodeError",
    "IncompleteInputError",
    "EndOfStreamError",
    "Leb128OverflowError",
    "NarrowingError",
    # Version
    "__version__",
]
