"""SHA-256 message digest with a hashlib-like interface."""

from __future__ import annotations

import struct
from typing import NamedTuple

from .ripemd160 import _BlockHash

__all__ = ["SHA256", "sha256"]

DIGEST_SIZE = 32
BLOCK_SIZE = 64

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


class _Sha2Params(NamedTuple):
    """Word size, constants and rotation amounts of one SHA-2 variant."""

    bits: int
    block_format: str
    k: tuple[int, ...]
    sigma0: tuple[int, int, int]
    sigma1: tuple[int, int, int]
    gamma0: tuple[int, int, int]
    gamma1: tuple[int, int, int]


def _sha2_compress(params: _Sha2Params, state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    bits = params.bits
    mask = (1 << bits) - 1

    def rotr(x: int, n: int) -> int:
        return ((x >> n) | (x << (bits - n))) & mask

    def rotations(x: int, amounts: tuple[int, int, int]) -> int:
        r1, r2, r3 = amounts
        return rotr(x, r1) ^ rotr(x, r2) ^ rotr(x, r3)

    def gamma(x: int, amounts: tuple[int, int, int]) -> int:
        r1, r2, shift = amounts
        return rotr(x, r1) ^ rotr(x, r2) ^ (x >> shift)

    w = list(struct.unpack(params.block_format, block))
    for i in range(16, len(params.k)):
        g0 = gamma(w[i - 15], params.gamma0)
        g1 = gamma(w[i - 2], params.gamma1)
        w.append((g1 + w[i - 7] + g0 + w[i - 16]) & mask)

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(params.k, w):
        t0 = h + rotations(e, params.sigma1) + (g ^ (e & (f ^ g))) + k + wi
        t1 = rotations(a, params.sigma0) + (((a | b) & c) | (a & b))
        h, g, f, e, d, c, b, a = g, f, e, (d + t0) & mask, c, b, a, (t0 + t1) & mask

    return tuple((s + v) & mask for s, v in zip(state, (a, b, c, d, e, f, g, h)))


_PARAMS = _Sha2Params(
    bits=32,
    block_format=">16I",
    k=_K,
    sigma0=(2, 13, 22),
    sigma1=(6, 11, 25),
    gamma0=(7, 18, 3),
    gamma1=(17, 19, 10),
)


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    return _sha2_compress(_PARAMS, state, block)


class SHA256(_BlockHash):
    """Incremental SHA-256 hasher."""

    name = "sha256"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE
    _initial_state = _INITIAL_STATE
    _length_format = ">Q"
    _state_format = ">8I"
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

    def copy(self) -> SHA256:
        """Return an independent hasher with the same state."""
        return self._clone()


def sha256(data) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return SHA256(data).digest()