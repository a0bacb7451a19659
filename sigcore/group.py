"""Points on the twisted Edwards curve -x^2 + y^2 = 1 + d*x^2*y^2 over GF(2^255 - 19)."""

from __future__ import annotations

import functools
from dataclasses import dataclass

from .field import P, FieldElement
from .scalar import Scalar, interleave2

__all__ = ["D", "BASE", "Point", "double_scalarmult", "scalarmult_base"]

D = FieldElement(
    37095705934669439343138083508754565189542113879843219016388785533085940283555
)
_D2 = D + D
_SQRT_M1 = FieldElement(pow(2, (P - 1) // 4, P))
_ZERO = FieldElement(0)
_ONE = FieldElement(1)

_BASE_X = FieldElement(
    15112221349535400772501151409588531511454012693041857206046113283949847762202
)
_BASE_Y = FieldElement(
    46316835694926478169428394003475163141307993866256225615783033603165251855960
)

_WINDOW_DIGITS = 85


def _from_completed(e: FieldElement, f: FieldElement, g: FieldElement, h: FieldElement) -> Point:
    return Point(e * f, g * h, f * g, e * h)


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """A curve point in extended coordinates (X:Y:Z:T) with x = X/Z, y = Y/Z, xy = T/Z."""

    x: FieldElement
    y: FieldElement
    z: FieldElement
    t: FieldElement

    @classmethod
    def neutral(cls) -> Point:
        """Return the neutral element (0, 1)."""
        return cls(_ZERO, _ONE, _ONE, _ZERO)

    @classmethod
    def unpack_neg(cls, data) -> Point:
        """Decode a 32-byte point encoding and return the negation of that point.

        Raises ValueError if the bytes do not encode a point on the curve.
        """
        raw = bytes(data)
        if len(raw) != 32:
            raise ValueError("point encoding must be 32 bytes")
        sign = raw[31] >> 7
        y = FieldElement.from_bytes(raw)

        y2 = y.square()
        num = y2 - _ONE
        den = y2 * D + _ONE

        # sqrt(num/den) = num * den^3 * (num * den^7)^((p-5)/8)
        den2 = den.square()
        den4 = den2.square()
        den6 = den4 * den2
        t = (den6 * num * den).pow2523()
        x = t * num * den * den * den

        if x.square() * den != num:
            x = x * _SQRT_M1
        if x.square() * den != num:
            raise ValueError("bytes do not encode a curve point")

        if x.parity() != 1 - sign:
            x = -x
        return cls(x, y, _ONE, x * y)

    def pack(self) -> bytes:
        """Encode as 32 bytes: y little-endian with the parity of x in the top bit."""
        zi = self.z.invert()
        x = self.x * zi
        y = self.y * zi
        out = bytearray(y.to_bytes())
        out[31] ^= x.parity() << 7
        return bytes(out)

    def is_neutral(self) -> bool:
        """Return True if this is the neutral element."""
        return self.x.is_zero() and self.y == self.z

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        a = (self.y - self.x) * (other.y - other.x)
        b = (self.x + self.y) * (other.x + other.y)
        c = self.t * other.t * _D2
        zz = self.z * other.z
        d = zz + zz
        return _from_completed(b - a, d - c, d + c, b + a)

    def double(self) -> Point:
        """Return 2 * self."""
        a = self.x.square()
        b = self.y.square()
        zz = self.z.square()
        c = zz + zz
        neg_a = -a
        e = (self.x + self.y).square() - a - b
        g = neg_a + b
        f = g - c
        h = neg_a - b
        return _from_completed(e, f, g, h)

    def _negate(self) -> Point:
        return Point(-self.x, self.y, self.z, -self.t)


BASE = Point(_BASE_X, _BASE_Y, _ONE, _BASE_X * _BASE_Y)


def _small_multiples(point: Point) -> tuple[Point, Point, Point, Point]:
    two = point.double()
    return (Point.neutral(), point, two, two + point)


def double_scalarmult(p1: Point, s1: Scalar, p2: Point, s2: Scalar) -> Point:
    """Return [s1]p1 + [s2]p2 (not constant time)."""
    m1 = _small_multiples(p1)
    m2 = _small_multiples(p2)
    # Entry 4*j + i holds [i]p1 + [j]p2.
    table = [a + b for b in m2 for a in m1]

    digits = interleave2(s1, s2)
    result = table[digits[-1]]
    for digit in reversed(digits[:-1]):
        result = result.double().double()
        if digit:
            result = result + table[digit]
    return result


@functools.cache
def _base_table() -> tuple[tuple[Point, ...], ...]:
    """For each 3-bit window position i, the points k * 8^i * B for k in 0..4."""
    rows = []
    point = BASE
    for _ in range(_WINDOW_DIGITS):
        two = point.double()
        four = two.double()
        rows.append((Point.neutral(), point, two, two + point, four))
        point = four.double()
    return tuple(rows)


def scalarmult_base(s: Scalar) -> Point:
    """Return [s]B for the standard base point B."""
    result = Point.neutral()
    for row, digit in zip(_base_table(), s.window3()):
        if not digit:
            continue
        multiple = row[abs(digit)]
        result = result + (multiple._negate() if digit < 0 else multiple)
    return result