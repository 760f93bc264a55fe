"""Integer width tiers and LEB128 format limits.

This module holds the constants shared by both codecs and the SizeClass
enumeration used to report the narrowest fixed-width type for a value.
"""

from __future__ import annotations

import enum

MAX_BITS = 128
CHUNK_BITS = 7
# ceil(128 / 7)
MAX_ENCODED_BYTES = -(-MAX_BITS // CHUNK_BITS)

CHUNK_MASK = 0x7F
CONTINUATION_BIT = 0x80
SIGN_BIT = 0x40

UINT128_MAX = (1 << MAX_BITS) - 1
INT128_MIN = -(1 << (MAX_BITS - 1))
INT128_MAX = (1 << (MAX_BITS - 1)) - 1


class SizeClass(enum.Enum):
    """Fixed-width integer tiers, narrowest first."""

    BITS8 = 8
    BITS32 = 32
    BITS64 = 64
    BITS128 = 128

    @property
    def bits(self) -> int:
        """Width of the tier in bits."""
        return self.value


def unsigned_range(bits: int) -> tuple[int, int]:
    """Return the inclusive (min, max) of an unsigned integer of ``bits`` width."""
    return 0, (1 << bits) - 1


def signed_range(bits: int) -> tuple[int, int]:
    """Return the inclusive (min, max) of a two's-complement integer of ``bits`` width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
