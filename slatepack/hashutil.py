from __future__ import annotations

from Cryptodome.Hash import SHA256

from .constants import CHECKSUM_SIZE


def sha256d(data: bytes) -> bytes:
    """SHA-256 applied twice (hash of the raw first digest)."""
    first = SHA256.new(data).digest()
    return SHA256.new(first).digest()


def generate_check(payload: bytes) -> bytes:
    """Return the 4-byte Base58Check code for ``payload``."""
    return sha256d(bytes(payload))[:CHECKSUM_SIZE]


def verify_check(check: bytes, payload: bytes) -> bool:
    return bytes(check) == generate_check(payload)
