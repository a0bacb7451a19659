"""Arithmetic modulo the order of the Ed25519 base point."""

from __future__ import annotations

import functools
from dataclasses import dataclass

__all__ = ["ORDER", "Scalar", "interleave2"]

ORDER = 2**252 + 27742317777372353535851937790883648493
_LIMIT = 1 << 256
_SHORT_LIMIT = 1 << 128


def _signed_window(value: int, width: int, count: int) -> list[int]:
    """Split ``value`` into ``count`` signed digits of ``width`` bits."""
    radix = 1 << width
    half = radix >> 1
    mask = radix - 1
    digits = []
    carry = 0
    for i in range(count - 1):
        digit = ((value >> (width * i)) & mask) + carry
        if digit >= half:
            digit -= radix
            carry = 1
        else:
            carry = 0
        digits.append(digit)
    digits.append(((value >> (width * (count - 1))) & mask) + carry)
    return digits


def _from_bytes(data, length: int) -> int:
    raw = bytes(data)
    if len(raw) != length:
        raise ValueError(f"scalar encoding must be {length} bytes")
    return int.from_bytes(raw, "little")


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Scalar:
    """A 256-bit scalar; the constructors reduce it modulo ``ORDER``."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value < _LIMIT:
            raise ValueError("scalar out of range")

    @classmethod
    def from_bytes32(cls, data) -> Scalar:
        """Decode 32 little-endian bytes and reduce modulo the group order."""
        return cls(_from_bytes(data, 32) % ORDER)

    @classmethod
    def from_bytes64(cls, data) -> Scalar:
        """Decode 64 little-endian bytes and reduce modulo the group order."""
        return cls(_from_bytes(data, 64) % ORDER)

    @classmethod
    def from_short(cls, data) -> Scalar:
        """Decode a 16-byte little-endian short scalar."""
        return cls(_from_bytes(data, 16))

    def to_bytes(self) -> bytes:
        """Encode as 32 little-endian bytes."""
        return self.value.to_bytes(32, "little")

    def is_zero(self) -> bool:
        """Return True for the zero scalar."""
        return self.value == 0

    def is_short(self) -> bool:
        """Return True if the upper 16 bytes are all zero."""
        return self.value < _SHORT_LIMIT

    def __lt__(self, other: Scalar) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.value < other.value

    def __add__(self, other: Scalar) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.value + other.value) % ORDER)

    def __mul__(self, other: Scalar) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.value * other.value) % ORDER)

    def sub_nored(self, other: Scalar) -> Scalar:
        """Subtract modulo 2^256 without reducing modulo the group order."""
        return Scalar((self.value - other.value) % _LIMIT)

    def window3(self) -> list[int]:
        """Return 85 signed digits r with sum r[i]*8^i == self, r[i] in -4..3."""
        return _signed_window(self.value, 3, 85)

    def window5(self) -> list[int]:
        """Return 51 signed digits r with sum r[i]*32^i == self, r[i] in -16..15."""
        return _signed_window(self.value, 5, 51)


def interleave2(s1: Scalar, s2: Scalar) -> bytes:
    """Interleave 2-bit groups of two scalars into 127 nibbles.

    Entry k holds bits 2k..2k+1 of ``s1`` in its low two bits and the same
    bits of ``s2`` in its high two bits.
    """
    return bytes(
        ((s1.value >> (2 * k)) & 3) | (((s2.value >> (2 * k)) & 3) << 2)
        for k in range(127)
    )