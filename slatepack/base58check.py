"""Modified Base58Check codec for slate payloads.

Unlike Bitcoin's Base58Check, the 4-byte checksum is placed in front of the
payload rather than after it:

1. take the first four bytes of SHA256(SHA256(payload))
2. concatenate those four bytes and the payload
3. Base58 encode the result with the Bitcoin alphabet

Decoding only splits the buffer; checksum verification is left to the caller.
"""

from __future__ import annotations

from typing import Tuple

import base58

from .constants import CHECKSUM_SIZE
from .errors import InvalidEncoding
from .hashutil import generate_check

ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")
_ALPHABET_SET = frozenset(ALPHABET)


def encode(payload: bytes) -> str:
    buf = generate_check(payload) + bytes(payload)
    return base58.b58encode(buf, alphabet=base58.BITCOIN_ALPHABET).decode("ascii")


def b58decode(encoded: str) -> bytes:
    """Decode a Base58 string with no whitespace or framing.

    Raises:
        InvalidEncoding: a character lies outside the Base58 alphabet.
    """
    for pos, ch in enumerate(encoded):
        if ch not in _ALPHABET_SET:
            raise InvalidEncoding(f"Invalid Base58 character {ch!r} at position {pos}")
    try:
        return base58.b58decode(encoded, alphabet=base58.BITCOIN_ALPHABET)
    except ValueError as exc:
        raise InvalidEncoding(f"Base58 decode failed: {exc}") from exc


def split_check(buf: bytes) -> Tuple[bytes, bytes]:
    if len(buf) < CHECKSUM_SIZE:
        raise InvalidEncoding(
            f"Decoded payload is {len(buf)} byte(s); at least {CHECKSUM_SIZE} are required for the checksum"
        )
    return buf[:CHECKSUM_SIZE], buf[CHECKSUM_SIZE:]


def decode(encoded: str) -> Tuple[bytes, bytes]:
    """Return ``(checksum, payload)`` decoded from ``encoded``.

    The checksum is not verified here.
    """
    return split_check(b58decode(encoded))
