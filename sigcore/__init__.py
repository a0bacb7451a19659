"""Pure-Python RIPEMD-160, SHA-256, SHA-512 and Ed25519-curve signatures with key recovery."""

__version__ = "0.1.0"

__all__ = ["field", "group", "ripemd160", "scalar", "sha256", "sha512", "sign"]