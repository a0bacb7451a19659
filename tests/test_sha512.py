import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sigcore.sha512 import SHA512, sha512

SAMPLE = (
    b"Once upon a midnight dreary, while I pondered weak and weary over many "
    b"a quant and curious volume of forgotten lore. While i nodded, nearly "
    b"napping, suddenly there came a tapping\n"
)


def test_sample_message_matches_reference():
    assert sha512(SAMPLE) == hashlib.sha512(SAMPLE).digest()


def test_abc():
    assert sha512(b"abc").hex() == (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    )


def test_empty_input_matches_reference():
    assert SHA512().digest() == hashlib.sha512(b"").digest()


def test_digest_size():
    assert len(sha512(b"x")) == SHA512.digest_size == 64


def test_digest_does_not_change_state():
    hasher = SHA512(b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == hashlib.sha512(b"hello world").digest()


def test_copy_is_independent():
    hasher = SHA512(b"prefix")
    clone = hasher.copy()
    clone.update(b"-suffix")
    assert hasher.digest() == hashlib.sha512(b"prefix").digest()
    assert clone.digest() == hashlib.sha512(b"prefix-suffix").digest()


def test_accepts_bytearray_and_memoryview():
    data = b"some bytes of data"
    assert sha512(bytearray(data)) == sha512(memoryview(data)) == sha512(data)


def test_rejects_text():
    with pytest.raises(TypeError):
        sha512("text")


def test_hexdigest_matches_digest():
    hasher = SHA512(SAMPLE)
    assert hasher.hexdigest() == hasher.digest().hex()


@settings(max_examples=50)
@given(st.binary(max_size=500), st.integers(min_value=1, max_value=260))
def test_chunked_updates_match_reference(data, chunk):
    hasher = SHA512()
    for start in range(0, len(data), chunk):
        hasher.update(data[start:start + chunk])
    assert hasher.digest() == hashlib.sha512(data).digest()