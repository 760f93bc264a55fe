"""Decode results with size classification.

UnsignedInfo and SignedInfo are immutable views over a decoded 128-bit value.
They report which fixed-width integer types can hold the value losslessly and
provide checked narrowing accessors.

Example:
    >>> from leb128codec.codec import unsigned
    >>> info = unsigned.decode(b"\\xe5\\x8e\\x26")
    >>> info.size_class()
    <SizeClass.BITS32: 32>
    >>> info.as_int32()
    624485
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import NarrowingError
from .sizes import MAX_BITS, SizeClass, signed_range, unsigned_range


class _IntegerInfo(BaseModel):
    """Shared classification logic; subclasses supply the tier ranges."""

    model_config = ConfigDict(
        # Results are values: never mutated after construction
        frozen=True,
        # Reject bools and numeric strings
        strict=True,
    )

    value: int

    tier_ranges: ClassVar[dict[int, tuple[int, int]]]
    signed: ClassVar[bool]

    @field_validator("value")
    @classmethod
    def check_domain(cls, value: int) -> int:
        low, high = cls.tier_ranges[MAX_BITS]
        if not low <= value <= high:
            raise ValueError(f"{value} is outside the 128-bit range [{low}, {high}]")
        return value

    def _fits(self, bits: int) -> bool:
        low, high = self.tier_ranges[bits]
        return low <= self.value <= high

    def can_be_byte(self) -> bool:
        """Return True if the value fits in an 8-bit integer of this signedness."""
        return self._fits(8)

    def can_be_int32(self) -> bool:
        """Return True if the value fits in a 32-bit integer of this signedness."""
        return self._fits(32)

    def can_be_int64(self) -> bool:
        """Return True if the value fits in a 64-bit integer of this signedness."""
        return self._fits(64)

    def size_class(self) -> SizeClass:
        """Return the narrowest tier that holds the value.

        Returns:
            BITS8, BITS32 or BITS64 when the value fits, else BITS128
        """
        if self.can_be_byte():
            return SizeClass.BITS8
        if self.can_be_int32():
            return SizeClass.BITS32
        return SizeClass.BITS64 if self.can_be_int64() else SizeClass.BITS128

    def _narrow(self, size: SizeClass) -> int:
        if not self._fits(size.bits):
            kind = "signed" if self.signed else "unsigned"
            raise NarrowingError(
                f"Value {self.value} does not fit in a {size.bits}-bit {kind} integer"
            )
        return self.value

    def as_byte(self) -> int:
        """Return the value as an 8-bit integer.

        Raises:
            NarrowingError: If can_be_byte() is False
        """
        return self._narrow(SizeClass.BITS8)

    def as_int32(self) -> int:
        """Return the value as a 32-bit integer.

        Raises:
            NarrowingError: If can_be_int32() is False
        """
        return self._narrow(SizeClass.BITS32)

    def as_int64(self) -> int:
        """Return the value as a 64-bit integer.

        Raises:
            NarrowingError: If can_be_int64() is False
        """
        return self._narrow(SizeClass.BITS64)

    def as_int128(self) -> int:
        """Return the value unchanged."""
        return self.value

    def to_bytes(self) -> bytes:
        """Re-encode the value with the codec that produced it."""
        # Import here to avoid circular dependency
        from .codec import signed, unsigned

        codec = signed if self.signed else unsigned
        return bytes(codec.encode(self.value))


class UnsignedInfo(_IntegerInfo):
    """Decoded unsigned value in the range 0 .. 2**128 - 1.

    Example:
        >>> info = UnsignedInfo(value=255)
        >>> info.can_be_byte(), info.size_class()
        (True, <SizeClass.BITS8: 8>)
    """

    tier_ranges: ClassVar[dict[int, tuple[int, int]]] = {
        size.bits: unsigned_range(size.bits) for size in SizeClass
    }
    signed: ClassVar[bool] = False


class SignedInfo(_IntegerInfo):
    """Decoded two's-complement value in the range -2**127 .. 2**127 - 1.

    Example:
        >>> info = SignedInfo(value=-129)
        >>> info.can_be_byte(), info.size_class()
        (False, <SizeClass.BITS32: 32>)
    """

    tier_ranges: ClassVar[dict[int, tuple[int, int]]] = {
        size.bits: signed_range(size.bits) for size in SizeClass
    }
    signed: ClassVar[bool] = True
