"""Arithmetic in the prime field GF(2^255 - 19)."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["P", "FieldElement"]

P = 2**255 - 19
_LOW_255_BITS = (1 << 255) - 1


@dataclass(frozen=True, slots=True)
class FieldElement:
    """An element of GF(2^255 - 19), always held fully reduced."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value < P:
            raise ValueError("field element out of range")

    @classmethod
    def from_bytes(cls, data) -> FieldElement:
        """Decode 32 little-endian bytes, ignoring the top bit."""
        raw = bytes(data)
        if len(raw) != 32:
            raise ValueError("field element encoding must be 32 bytes")
        return cls((int.from_bytes(raw, "little") & _LOW_255_BITS) % P)

    def to_bytes(self) -> bytes:
        """Encode as 32 little-endian bytes."""
        return self.value.to_bytes(32, "little")

    def is_zero(self) -> bool:
        """Return True for the zero element."""
        return self.value == 0

    def parity(self) -> int:
        """Return the lowest bit of the reduced value."""
        return self.value & 1

    def __add__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value + other.value) % P)

    def __sub__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value - other.value) % P)

    def __mul__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value * other.value) % P)

    def __neg__(self) -> FieldElement:
        return FieldElement(-self.value % P)

    def square(self) -> FieldElement:
        """Return self * self."""
        return FieldElement(self.value * self.value % P)

    def invert(self) -> FieldElement:
        """Return self^(p-2), the inverse for non-zero elements (zero maps to zero)."""
        return FieldElement(pow(self.value, P - 2, P))

    def pow2523(self) -> FieldElement:
        """Return self^((p-5)/8) = self^(2^252 - 3), used for square roots."""
        return FieldElement(pow(self.value, (P - 5) // 8, P))