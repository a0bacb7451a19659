"""RIPEMD-160 message digest with a hashlib-like interface."""

from __future__ import annotations

import struct

__all__ = ["RIPEMD160", "ripemd160"]

DIGEST_SIZE = 20
BLOCK_SIZE = 64

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_INITIAL_H = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# Ordering of message words for the left and right lines, per round.
_RL = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8),
    (3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12),
    (1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2),
    (4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13),
)
_RR = (
    (5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12),
    (6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2),
    (15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13),
    (8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14),
    (12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11),
)

# Rotation amounts, with the word permutations already applied.
_SL = (
    (11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8),
    (7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12),
    (11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5),
    (11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12),
    (9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6),
)
_SR = (
    (8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6),
    (9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11),
    (9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5),
    (15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8),
    (8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11),
)

_KL = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E)
_KR = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000)


class _BlockHash:
    """Merkle-Damgard machinery driven by a subclass's ``_compress`` function.

    Subclasses set ``name``, ``digest_size``, ``block_size``, the initial
    state, the struct formats of the length field and of the final state,
    and a static ``_compress(state, block)``.
    """

    name = ""
    digest_size = 0
    block_size = 64
    _initial_state: tuple[int, ...] = ()
    _length_format = ">Q"
    _state_format = ""

    def _reset(self, data) -> None:
        self._state: tuple[int, ...] = self._initial_state
        self._buffer = bytearray()
        self._length = 0
        if data:
            self._feed(data)

    def _absorb(self, state: tuple[int, ...], data: bytes) -> tuple[int, ...]:
        size = self.block_size
        for start in range(0, len(data), size):
            state = self._compress(state, data[start:start + size])
        return state

    def _feed(self, data) -> None:
        view = memoryview(data).cast("B")
        self._length += len(view)
        self._buffer += view
        full = len(self._buffer) - len(self._buffer) % self.block_size
        self._state = self._absorb(self._state, bytes(self._buffer[:full]))
        del self._buffer[:full]

    def _final(self) -> bytes:
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((self.block_size - 8 - len(tail)) % self.block_size)
        tail += struct.pack(self._length_format, (self._length << 3) & _MASK64)
        return struct.pack(self._state_format, *self._absorb(self._state, tail))

    def _clone(self):
        clone = type(self)()
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone


def _f1(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _f2(x: int, y: int, z: int) -> int:
    return ((x & y) | (~x & z)) & _MASK32


def _f3(x: int, y: int, z: int) -> int:
    return ((x | ~y) ^ z) & _MASK32


def _f4(x: int, y: int, z: int) -> int:
    return ((x & z) | (y & ~z)) & _MASK32


def _f5(x: int, y: int, z: int) -> int:
    return (x ^ (y | ~z)) & _MASK32


_FL = (_f1, _f2, _f3, _f4, _f5)
_FR = (_f5, _f4, _f3, _f2, _f1)


def _rol(shift: int, value: int) -> int:
    value &= _MASK32
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def _line(h: tuple[int, ...], words, funcs, order, shifts, constants):
    a, b, c, d, e = h
    for func, perm, rots, k in zip(funcs, order, shifts, constants):
        for index, shift in zip(perm, rots):
            t = (_rol(shift, a + func(b, c, d) + words[index] + k) + e) & _MASK32
            a, e, d, c, b = e, d, _rol(10, c), b, t
    return a, b, c, d, e


def _compress(h: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    words = struct.unpack("<16I", block)
    al, bl, cl, dl, el = _line(h, words, _FL, _RL, _SL, _KL)
    ar, br, cr, dr, er = _line(h, words, _FR, _RR, _SR, _KR)
    return (
        (h[1] + cl + dr) & _MASK32,
        (h[2] + dl + er) & _MASK32,
        (h[3] + el + ar) & _MASK32,
        (h[4] + al + br) & _MASK32,
        (h[0] + bl + cr) & _MASK32,
    )


class RIPEMD160(_BlockHash):
    """Incremental RIPEMD-160 hasher."""

    name = "ripemd160"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE
    _initial_state = _INITIAL_H
    _length_format = "<Q"
    _state_format = "<5I"
    _compress = staticmethod(_compress)

    def __init__(self, data=b"") -> None:
        self._reset(data)

    def update(self, data) -> None:
        """Feed more bytes into the hash."""
        self._feed(data)

    def digest(self) -> bytes:
        """Return the digest of everything fed so far, leaving the state intact."""
        return self._final()

    def hexdigest(self) -> str:
        """Return the digest as a lower-case hexadecimal string."""
        return self._final().hex()

    def copy(self) -> RIPEMD160:
        """Return an independent hasher with the same state."""
        return self._clone()


def ripemd160(data) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    return RIPEMD160(data).digest()