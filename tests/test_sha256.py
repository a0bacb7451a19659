import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sigcore.sha256 import SHA256, sha256

SAMPLE = (
    b"Now, I even I would celebrate in rhythms unapt the great immortal "
    b"Syracusan rivaled nevermore who in his wondrous lore passed on before "
    b"gave men his guidance how to circles mensurate.\n"
)


def test_sample_message_matches_reference():
    assert sha256(SAMPLE) == hashlib.sha256(SAMPLE).digest()


def test_empty_input():
    assert SHA256().hexdigest() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_abc():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 200])
def test_padding_boundaries(length):
    data = bytes(i % 251 for i in range(length))
    assert sha256(data) == hashlib.sha256(data).digest()


def test_digest_size():
    assert len(sha256(b"x")) == SHA256.digest_size == 32


def test_digest_does_not_change_state():
    hasher = SHA256(b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == hashlib.sha256(b"hello world").digest()


def test_copy_is_independent():
    hasher = SHA256(b"prefix")
    clone = hasher.copy()
    clone.update(b"-suffix")
    assert hasher.digest() == hashlib.sha256(b"prefix").digest()
    assert clone.digest() == hashlib.sha256(b"prefix-suffix").digest()


def test_accepts_bytearray_and_memoryview():
    data = b"some bytes of data"
    assert sha256(bytearray(data)) == sha256(memoryview(data)) == sha256(data)


def test_rejects_text():
    with pytest.raises(TypeError):
        sha256("text")


def test_hexdigest_matches_digest():
    hasher = SHA256(SAMPLE)
    assert hasher.hexdigest() == hasher.digest().hex()


@settings(max_examples=50)
@given(st.binary(max_size=300), st.integers(min_value=1, max_value=130))
def test_chunked_updates_match_reference(data, chunk):
    hasher = SHA256()
    for start in range(0, len(data), chunk):
        hasher.update(data[start:start + chunk])
    assert hasher.digest() == hashlib.sha256(data).digest()