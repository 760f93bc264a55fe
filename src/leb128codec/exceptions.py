"""Exception hierarchy for leb128codec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Leb128Error for easy catching of any codec error,
and each one carries a FailureKind tag so callers can dispatch on a single field.
"""

from __future__ import annotations

import enum


class FailureKind(enum.Enum):
    """Tag identifying why a codec operation failed."""

    BUFFER_TOO_SMALL = "buffer_too_small"
    VALUE_RANGE = "value_range"
    INCOMPLETE_INPUT = "incomplete_input"
    OVERFLOW = "overflow"
    NARROWING = "narrowing"


class Leb128Error(Exception):
    """Base exception for all leb128codec errors."""

    kind: FailureKind


class EncodeError(Leb128Error):
    """Raised when encoding a value fails.

    Examples:
        - Destination buffer is smaller than the encoded length
        - Value outside the codec's 128-bit domain
    """

    pass


class BufferTooSmallError(EncodeError):
    """Raised when a destination buffer cannot hold the full encoding.

    Nothing is written to the destination when this is raised.
    """

    kind = FailureKind.BUFFER_TOO_SMALL

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Buffer too small for encoded value: need {required} bytes, have {available}"
        )
        self.required = required
        self.available = available


class ValueRangeError(EncodeError):
    """Raised when a value is outside the domain of the selected codec.

    Examples:
        - Negative value passed to the unsigned codec
        - Value above 2**128 - 1 (unsigned) or outside [-2**127, 2**127 - 1] (signed)
        - Non-integer value
    """

    kind = FailureKind.VALUE_RANGE


class DecodeError(Leb128Error):
    """Raised when decoding binary data fails.

    Examples:
        - Source exhausted before a terminating byte
        - 19 bytes read without a terminating byte
    """

    pass


class IncompleteInputError(DecodeError):
    """Raised when the source ends before a byte with a clear continuation bit.

    A buffer that ends mid-sequence is reported here whether the data was
    truncated in transit or was never a valid encoding.
    """

    kind = FailureKind.INCOMPLETE_INPUT


class EndOfStreamError(IncompleteInputError):
    """Raised when a blocking byte stream is exhausted mid-sequence."""

    pass


class Leb128OverflowError(DecodeError):
    """Raised when 19 bytes are read without finding a terminating byte.

    Such a sequence would need more than 128 bits to represent.
    """

    kind = FailureKind.OVERFLOW


class NarrowingError(Leb128Error):
    """Raised when a decoded value is requested at a width it does not fit in."""

    kind = FailureKind.NARROWING
