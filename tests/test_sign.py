import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sigcore.group import Point
from sigcore.sign import Signature, extract, recover, sign, verify


def _random_bytes(rng, n):
    return bytes(rng.randrange(256) for _ in range(n))


def _invalid_point_encoding():
    for y in range(2, 200):
        encoding = y.to_bytes(32, "little")
        try:
            Point.unpack_neg(encoding)
        except ValueError:
            return encoding
    raise AssertionError("no invalid encoding found")


def test_random_keys_sign_and_verify():
    rng = random.Random(1)
    for _ in range(5):
        secret_key = _random_bytes(rng, 32)
        public_key = extract(secret_key)
        msg = _random_bytes(rng, 64)
        signature = sign(secret_key, msg)
        assert verify(public_key, signature, msg)


def test_recover_returns_public_key():
    secret_key = bytes(range(32))
    msg = b"recover me"
    signature = sign(secret_key, msg)
    assert recover(signature, msg) == extract(secret_key)


def test_signing_is_deterministic():
    secret_key = bytes(range(32))
    assert sign(secret_key, b"same").to_bytes() == sign(secret_key, b"same").to_bytes()
    assert sign(secret_key, b"same").r != sign(secret_key, b"other").r


def test_public_key_decodes_as_point():
    public_key = extract(bytes(32))
    point = Point.unpack_neg(public_key)
    assert (point + Point.unpack_neg(point.pack())).is_neutral()
    assert len(public_key) == 32


def test_tampered_message_fails():
    secret_key = bytes(range(32))
    public_key = extract(secret_key)
    signature = sign(secret_key, b"original")
    assert not verify(public_key, signature, b"originaL")


def test_tampered_s_fails():
    secret_key = bytes(range(32))
    public_key = extract(secret_key)
    msg = b"message"
    signature = sign(secret_key, msg)
    s = bytearray(signature.s)
    s[0] ^= 1
    assert not verify(public_key, Signature(signature.r, bytes(s)), msg)


def test_wrong_public_key_fails():
    msg = b"message"
    signature = sign(bytes(range(32)), msg)
    other_public_key = extract(bytes(range(1, 33)))
    assert not verify(other_public_key, signature, msg)


def test_verify_accepts_encoded_signature():
    secret_key = bytes(range(32))
    msg = b"bytes form"
    encoded = sign(secret_key, msg).to_bytes()
    assert verify(extract(secret_key), encoded, msg)


def test_invalid_r_is_rejected():
    signature = Signature(_invalid_point_encoding(), bytes(32))
    with pytest.raises(ValueError):
        recover(signature, b"msg")
    assert verify(extract(bytes(32)), signature, b"msg") is False


def test_signature_round_trip():
    signature = sign(bytes(range(32)), b"round trip")
    encoded = signature.to_bytes()
    assert len(encoded) == 64
    decoded = Signature.from_bytes(encoded)
    assert decoded.r == signature.r
    assert decoded.s == signature.s


def test_signature_wrong_lengths():
    with pytest.raises(ValueError):
        Signature.from_bytes(bytes(63))
    with pytest.raises(ValueError):
        Signature(bytes(31), bytes(32))


def test_wrong_key_lengths():
    with pytest.raises(ValueError):
        extract(bytes(31))
    with pytest.raises(ValueError):
        sign(bytes(33), b"msg")
    signature = sign(bytes(32), b"msg")
    with pytest.raises(ValueError):
        verify(bytes(31), signature, b"msg")


@settings(max_examples=5, deadline=None)
@given(st.binary(min_size=32, max_size=32), st.binary(max_size=200))
def test_sign_verify_property(secret_key, msg):
    public_key = extract(secret_key)
    signature = sign(secret_key, msg)
    assert verify(public_key, signature, msg)
    assert recover(signature, msg) == public_key