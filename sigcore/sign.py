"""Signing, verification and public-key recovery over the Ed25519 curve.

The challenge hash covers only R and the message, and S = H*k + a, which
makes the public key recoverable from a signature and its message.
"""

from __future__ import annotations

from dataclasses import dataclass

from .group import BASE, Point, double_scalarmult, scalarmult_base
from .scalar import Scalar
from .sha512 import sha512

__all__ = [
    "SECRET_KEY_SIZE",
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "Signature",
    "extract",
    "sign",
    "recover",
    "verify",
]

SECRET_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64


def _exact(data, size: int, what: str) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(raw)}")
    return raw


def _expand(secret_key) -> tuple[Scalar, bytes]:
    digest = bytearray(sha512(_exact(secret_key, SECRET_KEY_SIZE, "secret key")))
    digest[0] &= 248
    digest[31] &= 127
    digest[31] |= 64
    return Scalar.from_bytes32(digest[:32]), bytes(digest[32:])


@dataclass(frozen=True, slots=True)
class Signature:
    """A signature: the encoded point R and the scalar S, 32 bytes each."""

    r: bytes
    s: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.r, bytes) or len(self.r) != 32:
            raise ValueError("signature R must be 32 bytes")
        if not isinstance(self.s, bytes) or len(self.s) != 32:
            raise ValueError("signature S must be 32 bytes")

    def to_bytes(self) -> bytes:
        """Return the 64-byte encoding R || S."""
        return self.r + self.s

    @classmethod
    def from_bytes(cls, data) -> Signature:
        """Decode a 64-byte encoding R || S."""
        raw = _exact(data, SIGNATURE_SIZE, "signature")
        return cls(raw[:32], raw[32:])


def _as_signature(signature) -> Signature:
    if isinstance(signature, Signature):
        return signature
    return Signature.from_bytes(signature)


def extract(secret_key) -> bytes:
    """Return the 32-byte public key belonging to a 32-byte secret key."""
    a, _ = _expand(secret_key)
    return scalarmult_base(a).pack()


def sign(secret_key, message) -> Signature:
    """Sign ``message`` deterministically with a 32-byte secret key."""
    a, prefix = _expand(secret_key)
    msg = bytes(message)
    k = Scalar.from_bytes64(sha512(prefix + msg))
    r = scalarmult_base(k).pack()
    h = Scalar.from_bytes64(sha512(r + msg))
    s = h * k + a
    return Signature(r, s.to_bytes())


def recover(signature, message) -> bytes:
    """Return the public key that would have produced ``signature`` on ``message``.

    Raises ValueError if R is not a valid point encoding.
    """
    sig = _as_signature(signature)
    msg = bytes(message)
    h = Scalar.from_bytes64(sha512(sig.r + msg))
    neg_r = Point.unpack_neg(sig.r)
    s = Scalar.from_bytes32(sig.s)
    return double_scalarmult(neg_r, h, BASE, s).pack()


def verify(public_key, signature, message) -> bool:
    """Return True if ``signature`` on ``message`` belongs to ``public_key``."""
    expected = _exact(public_key, PUBLIC_KEY_SIZE, "public key")
    try:
        recovered = recover(signature, message)
    except ValueError:
        return False
    return recovered == expected