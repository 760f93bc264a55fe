"""Signed LEB128 codec for two's-complement integers in -2**127 .. 2**127 - 1.

Encoding stops once the remaining value is pure sign extension of the last
emitted chunk: 0 with bit 6 clear, or -1 with bit 6 set. The decoder reads
bit 6 of the final byte back as the sign and extends it up to bit 127.

Example:
    >>> from leb128codec.codec import signed
    >>> signed.encode(-65)
    b'\\xbf\\x7f'
    >>> signed.decode(b"\\xbf\\x7f").value
    -65
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, Optional

from ..exceptions import BufferTooSmallError
from ..info import SignedInfo
from ..sizes import (
    CHUNK_BITS,
    CHUNK_MASK,
    CONTINUATION_BIT,
    INT128_MAX,
    INT128_MIN,
    MAX_BITS,
    SIGN_BIT,
    UINT128_MAX,
)
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
    """Yield the encoded bytes of a validated signed value."""
    more = True
    while more:
        chunk = value & CHUNK_MASK
        # Arithmetic shift: negative values stay negative
        value >>= CHUNK_BITS
        sign_set = bool(chunk & SIGN_BIT)
        more = not ((value == 0 and not sign_set) or (value == -1 and sign_set))
        yield chunk | CONTINUATION_BIT if more else chunk


def _to_info(result: Scan) -> SignedInfo:
    value = result.accumulator
    if result.shift < MAX_BITS and result.last_byte & SIGN_BIT:
        # Fill bits shift..127 with ones
        value |= UINT128_MAX ^ ((1 << result.shift) - 1)
    if value > INT128_MAX:
        value -= 1 << MAX_BITS
    return SignedInfo(value=value)


def encoded_byte_count(value: int) -> int:
    """Return the number of bytes encode() would produce for ``value``.

    Runs the encoder's termination loop without producing output.

    Raises:
        ValueRangeError: If value is outside the signed 128-bit range
    """
    check_range(value, INT128_MIN, INT128_MAX)
    return sum(1 for _ in _chunks(value))


def try_encode(value: int, destination: bytearray | memoryview) -> tuple[bool, int]:
    """Encode ``value`` into a caller-owned buffer.

    Nothing is written unless the whole encoding fits.

    Args:
        value: Integer in -2**127 .. 2**127 - 1
        destination: Writable buffer; encoding starts at index 0

    Returns:
        (True, bytes_written) on success, (False, 0) if destination is too small

    Raises:
        ValueRangeError: If value is outside the signed 128-bit range
    """
    required = encoded_byte_count(value)
    if len(destination) < required:
        logger.debug(
            "Signed encode of %d needs %d bytes, destination has %d",
            value,
            required,
            len(destination),
        )
        return False, 0

    return True, write_into(destination, _chunks(value))


def encode(
    value: int, destination: Optional[bytearray | memoryview] = None
) -> bytes | memoryview:
    """Encode ``value`` as signed LEB128.

    Args:
        value: Integer in -2**127 .. 2**127 - 1
        destination: Optional writable buffer. When omitted, a new bytes
            object sized exactly to the encoding is returned.

    Returns:
        New bytes, or a memoryview over the written prefix of destination

    Raises:
        ValueRangeError: If value is outside the signed 128-bit range
        BufferTooSmallError: If destination cannot hold the encoding
    """
    if destination is None:
        check_range(value, INT128_MIN, INT128_MAX)
        return bytes(_chunks(value))

    success, written = try_encode(value, destination)
    if not success:
        raise BufferTooSmallError(encoded_byte_count(value), len(destination))
    return memoryview(destination)[:written]


def write(value: int, sink: BinaryIO) -> int:
    """Write the encoding of ``value`` to a binary stream.

    Returns:
        Number of bytes written
    """
    check_range(value, INT128_MIN, INT128_MAX)
    return write_to_sink(sink, _chunks(value))


def try_decode(source: BytesLike, offset: int = 0) -> tuple[bool, Optional[SignedInfo], int]:
    """Decode one signed value from ``source[offset:]`` without raising.

    Returns:
        (True, info, bytes_consumed) on success; (False, None, 0) if the
        source ends mid-sequence or 19 bytes carry no terminator
    """
    outcome = scan(buffer_bytes(source, offset))
    if not isinstance(outcome, Scan):
        logger.debug("Signed decode at offset %d failed: %s", offset, outcome.value)
        return False, None, 0
    return True, _to_info(outcome), outcome.consumed


def decode_with_count(source: BytesLike, offset: int = 0) -> tuple[SignedInfo, int]:
    """Decode one signed value and report how many bytes it used.

    Raises:
        IncompleteInputError: If the source ends before a terminating byte
        Leb128OverflowError: If 19 bytes carry no terminator
    """
    outcome = scan(buffer_bytes(source, offset))
    if not isinstance(outcome, Scan):
        raise failure_error(outcome)
    return _to_info(outcome), outcome.consumed


def decode(source: BytesLike, offset: int = 0) -> SignedInfo:
    """Decode one signed value from ``source[offset:]``."""
    info, _ = decode_with_count(source, offset)
    return info


def read(stream: BinaryIO) -> SignedInfo:
    """Read one signed value from a blocking binary stream.

    Raises:
        EndOfStreamError: If the stream ends mid-sequence
        Leb128OverflowError: If 19 bytes carry no terminator
    """
    outcome = scan(stream_bytes(stream))
    if not isinstance(outcome, Scan):
        raise failure_error(outcome, stream=True)
    return _to_info(outcome)
