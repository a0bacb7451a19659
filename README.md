# sigcore

Pure-Python message digests and Ed25519-curve signatures, with no third-party
dependencies.

It provides:

- `sigcore.ripemd160`: RIPEMD-160 (`RIPEMD160` class, `ripemd160()` helper)
- `sigcore.sha256`: SHA-256 (`SHA256` class, `sha256()` helper)
- `sigcore.sha512`: SHA-512 (`SHA512` class, `sha512()` helper)
- `sigcore.sign`: key extraction, signing, verification and public-key
  recovery (`extract`, `sign`, `verify`, `recover`, `Signature`)
- The underlying arithmetic: `sigcore.field.FieldElement` (integers modulo
  2^255 - 19), `sigcore.scalar.Scalar` (integers modulo the group order) and
  `sigcore.group.Point` (points on the twisted Edwards curve), with
  `sigcore.group.scalarmult_base` and `sigcore.group.double_scalarmult`.

The code is written to be readable. It is much slower than native
implementations and makes no claim to run in constant time.

## Installation

```
pip install .
```

## Hashing

The hash classes work like those in `hashlib`: pass initial data to the
constructor or feed it with `update`, then read `digest()` or `hexdigest()`.
Reading the digest leaves the running state intact, and `copy()` gives an
independent snapshot of it. Each class also carries `name`, `digest_size`
and `block_size`.

```python
from sigcore.sha256 import SHA256, sha256
from sigcore.ripemd160 import ripemd160

h = SHA256(b"hello ")
h.update(b"world")
print(h.hexdigest())

assert sha256(b"hello world") == h.digest()
print(ripemd160(b"a" * 1_000_000).hex())
```

## Signing

A secret key is 32 bytes and a public key is 32 bytes. A `Signature` has two
32-byte halves, `r` (an encoded curve point) and `s` (a scalar), and is 64
bytes long when serialised with `to_bytes()`.

Signing is deterministic. The challenge hash is SHA-512 over `r` and the
message only, and `s = h * k + a`; this makes the public key recoverable from
a signature and its message, but the signatures are not interchangeable with
those of standard Ed25519.

```python
import os
from sigcore.sign import Signature, extract, sign, verify, recover

seed = os.urandom(32)
public_key = extract(seed)

message = b"attack at dawn"
signature = sign(seed, message)

assert verify(public_key, signature, message)
assert recover(signature, message) == public_key

wire = signature.to_bytes()
assert Signature.from_bytes(wire) == signature
assert verify(public_key, wire, message)
```

`recover` accepts a `Signature` or its 64-byte encoding and computes the
public key that the signature and message imply; it raises `ValueError` if
`r` is not a valid point encoding. `verify` compares the recovered key with
the one it was given and returns `False` for an invalid `r`. Inputs of the
wrong length raise `ValueError`.

## What it does not do

The package is a library only: it has no command-line tool, does not
generate or store keys for you, and offers no batch verification.

## Running the tests

```
pip install .[test]
pytest
```