"""Unit tests for the unsigned LEB128 codec."""

from __future__ import annotations

import io

import pytest

from leb128codec import (
    UINT128_MAX,
    BufferTooSmallError,
    EndOfStreamError,
    FailureKind,
    IncompleteInputError,
    Leb128OverflowError,
    SizeClass,
    UnsignedInfo,
    ValueRangeError,
)
from leb128codec.codec import unsigned

VECTORS = [
    (0, b"\x00"),
    (1, b"\x01"),
    (5, b"\x05"),
    (63, b"\x3f"),
    (64, b"\x40"),
    (127, b"\x7f"),
    (128, b"\x80\x01"),
    (327, b"\xc7\x02"),
    (8192, b"\x80\x40"),
    (16383, b"\xff\x7f"),
    (16384, b"\x80\x80\x01"),
    (18193, b"\x91\x8e\x01"),
    (624485, b"\xe5\x8e\x26"),
    (0xFFFFFFFF, b"\xff\xff\xff\xff\x0f"),
    (0xFFFFFFFFFFFFFFFF, b"\xff" * 9 + b"\x01"),
    (UINT128_MAX, b"\xff" * 18 + b"\x03"),
]


class TestEncode:
    """Test unsigned encoding."""

    @pytest.mark.parametrize("value,expected", VECTORS)
    def test_known_vectors(self, value: int, expected: bytes) -> None:
        """Test encoding against known byte sequences."""
        assert unsigned.encode(value) == expected

    @pytest.mark.parametrize("value,expected", VECTORS)
    def test_encoded_byte_count_matches(self, value: int, expected: bytes) -> None:
        """Test the byte count matches the produced encoding."""
        assert unsigned.encoded_byte_count(value) == len(expected)

    def test_zero_is_single_byte(self) -> None:
        """Test zero encodes to one zero byte."""
        assert unsigned.encoded_byte_count(0) == 1
        assert unsigned.encode(0) == b"\x00"

    def test_byte_count_boundaries(self) -> None:
        """Test every 7-bit boundary adds one byte."""
        for n in range(1, 19):
            assert unsigned.encoded_byte_count((1 << (7 * n)) - 1) == n
            assert unsigned.encoded_byte_count(1 << (7 * n)) == n + 1

    def test_max_value_needs_19_bytes(self) -> None:
        """Test the largest value uses the maximum length."""
        assert unsigned.encoded_byte_count(UINT128_MAX) == 19

    @pytest.mark.parametrize("value", [-1, UINT128_MAX + 1, 1.5, "1", True])
    def test_rejects_out_of_domain(self, value: object) -> None:
        """Test values outside 0 .. 2**128 - 1 are rejected."""
        with pytest.raises(ValueRangeError) as exc_info:
            unsigned.encode(value)  # type: ignore[arg-type]
        assert exc_info.value.kind is FailureKind.VALUE_RANGE

        with pytest.raises(ValueRangeError):
            unsigned.encoded_byte_count(value)  # type: ignore[arg-type]


class TestTryEncode:
    """Test non-raising buffer encoding."""

    def test_writes_into_buffer(self) -> None:
        """Test encoding into a larger buffer."""
        buffer = bytearray(8)
        success, written = unsigned.try_encode(624485, buffer)

        assert success is True
        assert written == 3
        assert buffer == b"\xe5\x8e\x26\x00\x00\x00\x00\x00"

    def test_exact_size_buffer(self) -> None:
        """Test a buffer of exactly the required size."""
        buffer = bytearray(2)
        assert unsigned.try_encode(128, buffer) == (True, 2)
        assert buffer == b"\x80\x01"

    def test_buffer_too_small(self) -> None:
        """Test failure leaves the buffer untouched."""
        buffer = bytearray(b"\xaa")
        assert unsigned.try_encode(UINT128_MAX, buffer) == (False, 0)
        assert buffer == b"\xaa"

    def test_empty_buffer(self) -> None:
        """Test even zero needs one byte."""
        assert unsigned.try_encode(0, bytearray()) == (False, 0)

    def test_memoryview_destination(self) -> None:
        """Test writing through a memoryview into part of a larger buffer."""
        backing = bytearray(6)
        view = memoryview(backing)[2:]
        assert unsigned.try_encode(16384, view) == (True, 3)
        assert backing == b"\x00\x00\x80\x80\x01\x00"


class TestEncodeIntoBuffer:
    """Test strict buffer encoding."""

    def test_returns_written_prefix(self) -> None:
        """Test the returned view covers exactly the written bytes."""
        buffer = bytearray(19)
        result = unsigned.encode(16383, buffer)

        assert isinstance(result, memoryview)
        assert bytes(result) == b"\xff\x7f"
        assert buffer[:2] == b"\xff\x7f"

    def test_buffer_too_small_raises(self) -> None:
        """Test an undersized buffer raises with sizes attached."""
        buffer = bytearray(2)
        with pytest.raises(BufferTooSmallError, match="need 3 bytes, have 2") as exc_info:
            unsigned.encode(16384, buffer)

        assert exc_info.value.required == 3
        assert exc_info.value.available == 2
        assert exc_info.value.kind is FailureKind.BUFFER_TOO_SMALL
        assert buffer == b"\x00\x00"


class TestWrite:
    """Test encoding to a byte sink."""

    def test_write_to_bytesio(self) -> None:
        """Test writing to an in-memory stream."""
        stream = io.BytesIO()
        assert unsigned.write(624485, stream) == 3
        assert stream.getvalue() == b"\xe5\x8e\x26"

    def test_one_write_per_byte(self, sink) -> None:
        """Test the sink receives each byte in its own call, in order."""
        assert unsigned.write(16384, sink) == 3
        assert sink.writes == [b"\x80", b"\x80", b"\x01"]


class TestDecode:
    """Test unsigned decoding."""

    @pytest.mark.parametrize("value,encoded", VECTORS)
    def test_known_vectors(self, value: int, encoded: bytes) -> None:
        """Test decoding known byte sequences."""
        info = unsigned.decode(encoded)
        assert isinstance(info, UnsignedInfo)
        assert info.value == value

    def test_literal_vector_size_class(self) -> None:
        """Test 624485 decodes with a 32-bit size class."""
        info = unsigned.decode(b"\xe5\x8e\x26")
        assert info.value == 624485
        assert info.size_class() is SizeClass.BITS32

    def test_decode_with_count(self) -> None:
        """Test bytes consumed is reported."""
        info, consumed = unsigned.decode_with_count(b"\x80\x01")
        assert info.value == 128
        assert consumed == 2

    def test_non_minimal_encoding(self) -> None:
        """Test padded encodings still decode."""
        assert unsigned.decode(b"\x83\x80\x00").value == 3

    def test_trailing_bytes_untouched(self) -> None:
        """Test only the first value is consumed."""
        info, consumed = unsigned.decode_with_count(b"\x01\xff\xff\xff")
        assert info.value == 1
        assert consumed == 1

    def test_with_offset(self) -> None:
        """Test decoding from a non-zero offset."""
        data = b"\xaa\xbb\x80\x01\xcc"
        info, consumed = unsigned.decode_with_count(data, offset=2)
        assert info.value == 128
        assert consumed == 2

    def test_consecutive_values(self) -> None:
        """Test decoding several values back to back."""
        values = [0, 127, 128, 16384, 0xFFFFFFFF, UINT128_MAX]
        data = b"".join(unsigned.encode(v) for v in values)

        offset = 0
        for expected in values:
            info, consumed = unsigned.decode_with_count(data, offset)
            assert info.value == expected
            offset += consumed
        assert offset == len(data)

    def test_high_bits_of_final_byte_discarded(self) -> None:
        """Test bits beyond 128 in a terminated 19-byte sequence are dropped."""
        assert unsigned.decode(b"\xff" * 18 + b"\x7f").value == UINT128_MAX

    @pytest.mark.parametrize("data", [b"", b"\x80", b"\x80\x80", b"\xff" * 18])
    def test_incomplete_raises(self, data: bytes) -> None:
        """Test truncated input raises IncompleteInputError."""
        with pytest.raises(IncompleteInputError, match="terminating byte") as exc_info:
            unsigned.decode(data)
        assert exc_info.value.kind is FailureKind.INCOMPLETE_INPUT

    def test_offset_past_end_raises(self) -> None:
        """Test an offset beyond the data is incomplete input."""
        with pytest.raises(IncompleteInputError):
            unsigned.decode(b"\x01", offset=5)

    def test_negative_offset_rejected(self) -> None:
        """Test negative offsets are a caller error."""
        with pytest.raises(ValueError, match="offset"):
            unsigned.decode(b"\x01", offset=-1)

    def test_overflow_raises(self, overflow_bytes: bytes) -> None:
        """Test 19 continuation bytes raise an overflow error."""
        with pytest.raises(Leb128OverflowError, match="exceeds 128 bits") as exc_info:
            unsigned.decode(overflow_bytes)
        assert exc_info.value.kind is FailureKind.OVERFLOW

    def test_overflow_with_more_data(self, overflow_bytes: bytes) -> None:
        """Test the ceiling applies even when a terminator follows."""
        with pytest.raises(Leb128OverflowError):
            unsigned.decode(overflow_bytes + b"\x00")


class TestTryDecode:
    """Test non-raising decoding."""

    def test_success(self) -> None:
        """Test a successful decode returns all three outputs."""
        success, info, consumed = unsigned.try_decode(b"\xe5\x8e\x26\x99")
        assert success is True
        assert info is not None
        assert info.value == 624485
        assert consumed == 3

    def test_overflow(self, overflow_bytes: bytes) -> None:
        """Test overflow fails with zero bytes consumed."""
        assert unsigned.try_decode(overflow_bytes) == (False, None, 0)

    @pytest.mark.parametrize("data", [b"", b"\x80", b"\xe5\x8e"])
    def test_incomplete(self, data: bytes) -> None:
        """Test truncated input fails with zero bytes consumed."""
        assert unsigned.try_decode(data) == (False, None, 0)

    def test_accepts_bytearray_and_memoryview(self) -> None:
        """Test any bytes-like source is accepted."""
        data = bytearray(b"\x80\x01")
        assert unsigned.try_decode(data)[1] == UnsignedInfo(value=128)
        assert unsigned.try_decode(memoryview(data))[1] == UnsignedInfo(value=128)


class TestRead:
    """Test decoding from a blocking byte source."""

    def test_read_leaves_stream_after_value(self) -> None:
        """Test the stream is positioned right after the terminator."""
        stream = io.BytesIO(b"\xe5\x8e\x26\x01")
        assert unsigned.read(stream).value == 624485
        assert stream.tell() == 3
        assert unsigned.read(stream).value == 1

    def test_end_of_stream(self) -> None:
        """Test a stream ending mid-sequence raises EndOfStreamError."""
        with pytest.raises(EndOfStreamError):
            unsigned.read(io.BytesIO(b"\x80\x80"))

    def test_end_of_stream_is_incomplete_input(self) -> None:
        """Test stream exhaustion is a kind of incomplete input."""
        with pytest.raises(IncompleteInputError):
            unsigned.read(io.BytesIO(b""))

    def test_overflow_reads_at_most_19_bytes(self, overflow_bytes: bytes) -> None:
        """Test overflow stops reading at the ceiling."""
        stream = io.BytesIO(overflow_bytes + b"\x00\x00")
        with pytest.raises(Leb128OverflowError):
            unsigned.read(stream)
        assert stream.tell() == 19
