"""Chunk-level primitives shared by the unsigned and signed codecs.

Both codecs accumulate 7-bit chunks the same way and fail the same way, so the
byte loop lives here once. scan() returns a discriminated outcome: a Scan on
success or a FailureKind tag on failure. The try_* entry points flatten that
outcome to a flag, the strict ones turn the tag into an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, Union

from ..exceptions import (
    DecodeError,
    EndOfStreamError,
    FailureKind,
    IncompleteInputError,
    Leb128OverflowError,
    ValueRangeError,
)
from ..sizes import CHUNK_BITS, CHUNK_MASK, CONTINUATION_BIT, MAX_ENCODED_BYTES, UINT128_MAX

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Scan:
    """Raw result of reading one LEB128 sequence.

    Attributes:
        accumulator: Data bits gathered so far, truncated to 128 bits
        shift: Number of data bits read (7 per byte)
        last_byte: The terminating byte, needed for sign extension
        consumed: Number of bytes read, terminator included
    """

    accumulator: int
    shift: int
    last_byte: int
    consumed: int


ScanOutcome = Union[Scan, FailureKind]


def scan(source: Iterable[int]) -> ScanOutcome:
    """Read bytes until one has its continuation bit clear.

    Never pulls more than MAX_ENCODED_BYTES items from ``source`` and never
    pulls past the terminating byte, so lazy sources are left positioned
    directly after the sequence.

    Args:
        source: Iterable of byte values (0-255)

    Returns:
        Scan on success, FailureKind.INCOMPLETE_INPUT if ``source`` ran out
        first, FailureKind.OVERFLOW if 19 bytes had no terminator
    """
    accumulator = 0
    shift = 0
    consumed = 0

    for byte in source:
        accumulator |= (byte & CHUNK_MASK) << shift
        shift += CHUNK_BITS
        consumed += 1

        if not byte & CONTINUATION_BIT:
            return Scan(accumulator & UINT128_MAX, shift, byte, consumed)

        if consumed == MAX_ENCODED_BYTES:
            return FailureKind.OVERFLOW

    return FailureKind.INCOMPLETE_INPUT


def buffer_bytes(source: BytesLike, offset: int = 0) -> memoryview:
    """Return a zero-copy view of ``source`` starting at ``offset``.

    Raises:
        ValueError: If offset is negative
    """
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    return memoryview(source).cast("B")[offset:]


def stream_bytes(stream: BinaryIO) -> Iterator[int]:
    """Yield bytes from a blocking binary stream one read at a time."""
    while True:
        data = stream.read(1)
        if not data:
            return
        yield data[0]


def failure_error(kind: FailureKind, *, stream: bool = False) -> DecodeError:
    """Build the exception matching a scan failure tag.

    Args:
        kind: Failure tag returned by scan()
        stream: True when the bytes came from a blocking stream

    Returns:
        Exception instance for the caller to raise
    """
    if kind is FailureKind.OVERFLOW:
        return Leb128OverflowError(
            f"Encoded value exceeds 128 bits: no terminating byte in {MAX_ENCODED_BYTES} bytes"
        )
    if stream:
        return EndOfStreamError("Stream ended before a terminating LEB128 byte")
    return IncompleteInputError("Invalid LEB128 data: source ended before a terminating byte")


def check_range(value: object, low: int, high: int) -> int:
    """Validate that ``value`` is an int inside [low, high].

    Raises:
        ValueRangeError: If value is not an int or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueRangeError(f"LEB128 values must be int, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueRangeError(f"Value {value} out of range [{low}, {high}]")
    return value


def write_into(destination: bytearray | memoryview, chunks: Iterable[int]) -> int:
    """Copy encoded bytes into ``destination`` from index 0.

    The caller has already checked the capacity.

    Returns:
        Number of bytes written
    """
    written = 0
    for chunk in chunks:
        destination[written] = chunk
        written += 1
    return written


def write_to_sink(sink: BinaryIO, chunks: Iterable[int]) -> int:
    """Write encoded bytes to a binary stream, one write() call per byte.

    Returns:
        Number of bytes written
    """
    written = 0
    for chunk in chunks:
        sink.write(bytes((chunk,)))
        written += 1
    return written
