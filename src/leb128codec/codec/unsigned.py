"""Unsigned LEB128 codec for integers in 0 .. 2**128 - 1.

Each byte carries 7 data bits, least significant chunk first; bit 7 is set on
every byte except the last. Zero encodes as a single 0x00 byte.

Example:
    >>> from leb128codec.codec import unsigned
    >>> unsigned.encode(624485)
    b'\\xe5\\x8e&'
    >>> unsigned.decode(b"\\xe5\\x8e\\x26").value
    624485
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, Optional

from ..exceptions import BufferTooSmallError
from ..info import UnsignedInfo
from ..sizes import CHUNK_BITS, CHUNK_MASK, CONTINUATION_BIT, UINT128_MAX
from .chunks import (
    BytesLike,
    Scan,
    buffer_bytes,
    check_range,
    failure_error,
    scan,
    stream_bytes,
    write_into,
    write_to_sink,
)

logger = logging.getLogger(__name__)


def _chunks(value: int) -> Iterator[int]:
    """Yield the encoded bytes of a validated non-negative value."""
    while True:
        chunk = value & CHUNK_MASK
        value >>= CHUNK_BITS
        if value:
            yield chunk | CONTINUATION_BIT
        else:
            yield chunk
            return


def _to_info(result: Scan) -> UnsignedInfo:
    return UnsignedInfo(value=result.accumulator)


def encoded_byte_count(value: int) -> int:
    """Return the number of bytes encode() would produce for ``value``.

    Args:
        value: Integer in 0 .. 2**128 - 1

    Returns:
        Encoded length in bytes (1-19)

    Raises:
        ValueRangeError: If value is outside the unsigned 128-bit range
    """
    check_range(value, 0, UINT128_MAX)
    return max(1, -(-value.bit_length() // CHUNK_BITS))


def try_encode(value: int, destination: bytearray | memoryview) -> tuple[bool, int]:
    """Encode ``value`` into a caller-owned buffer.

    Nothing is written unless the whole encoding fits.

    Args:
        value: Integer in 0 .. 2**128 - 1
        destination: Writable buffer; encoding starts at index 0

    Returns:
        (True, bytes_written) on success, (False, 0) if destination is too small

    Raises:
        ValueRangeError: If value is outside the unsigned 128-bit range
    """
    required = encoded_byte_count(value)
    if len(destination) < required:
        logger.debug(
            "Unsigned encode of %d needs %d bytes, destination has %d",
            value,
            required,
            len(destination),
        )
        return False, 0

    return True, write_into(destination, _chunks(value))


def encode(
    value: int, destination: Optional[bytearray | memoryview] = None
) -> bytes | memoryview:
    """Encode ``value`` as unsigned LEB128.

    Args:
        value: Integer in 0 .. 2**128 - 1
        destination: Optional writable buffer. When omitted, a new bytes
            object sized exactly to the encoding is returned.

    Returns:
        New bytes, or a memoryview over the written prefix of destination

    Raises:
        ValueRangeError: If value is outside the unsigned 128-bit range
        BufferTooSmallError: If destination cannot hold the encoding
    """
    if destination is None:
        check_range(value, 0, UINT128_MAX)
        return bytes(_chunks(value))

    success, written = try_encode(value, destination)
    if not success:
        raise BufferTooSmallError(encoded_byte_count(value), len(destination))
    return memoryview(destination)[:written]


def write(value: int, sink: BinaryIO) -> int:
    """Write the encoding of ``value`` to a binary stream.

    Returns:
        Number of bytes written

    Raises:
        ValueRangeError: If value is outside the unsigned 128-bit range
    """
    check_range(value, 0, UINT128_MAX)
    return write_to_sink(sink, _chunks(value))


def try_decode(source: BytesLike, offset: int = 0) -> tuple[bool, Optional[UnsignedInfo], int]:
    """Decode one unsigned value from ``source[offset:]`` without raising.

    Bytes after the terminating byte are left untouched, so values can be
    decoded back to back by advancing ``offset`` by the consumed count.

    Args:
        source: Bytes-like object holding the encoding
        offset: Index of the first byte of the encoding

    Returns:
        (True, info, bytes_consumed) on success; (False, None, 0) if the
        source ends mid-sequence or 19 bytes carry no terminator
    """
    outcome = scan(buffer_bytes(source, offset))
    if not isinstance(outcome, Scan):
        logger.debug("Unsigned decode at offset %d failed: %s", offset, outcome.value)
        return False, None, 0
    return True, _to_info(outcome), outcome.consumed


def decode_with_count(source: BytesLike, offset: int = 0) -> tuple[UnsignedInfo, int]:
    """Decode one unsigned value and report how many bytes it used.

    Raises:
        IncompleteInputError: If the source ends before a terminating byte
        Leb128OverflowError: If 19 bytes carry no terminator
    """
    outcome = scan(buffer_bytes(source, offset))
    if not isinstance(outcome, Scan):
        raise failure_error(outcome)
    return _to_info(outcome), outcome.consumed


def decode(source: BytesLike, offset: int = 0) -> UnsignedInfo:
    """Decode one unsigned value from ``source[offset:]``.

    Raises:
        IncompleteInputError: If the source ends before a terminating byte
        Leb128OverflowError: If 19 bytes carry no terminator
    """
    info, _ = decode_with_count(source, offset)
    return info


def read(stream: BinaryIO) -> UnsignedInfo:
    """Read one unsigned value from a blocking binary stream.

    The stream is left positioned right after the terminating byte.

    Raises:
        EndOfStreamError: If the stream ends mid-sequence
        Leb128OverflowError: If 19 bytes carry no terminator
    """
    outcome = scan(stream_bytes(stream))
    if not isinstance(outcome, Scan):
        raise failure_error(outcome, stream=True)
    return _to_info(outcome)
