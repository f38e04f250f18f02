"""
slatepack — text armor for binary slates.

Features:

- Modified Base58Check: the first four bytes of SHA256(SHA256(payload)) are
  prepended to the payload before Base58 encoding, so corruption in transit
  is detected on decode.
- Readable output: the Base58 text is split into 15-character words and framed
  as ``BEGIN SLATEPACK. ... . END SLATEPACK.``
- Tolerant input: dearmoring ignores '>', spaces, tabs and line breaks around
  the framing tokens and inside the payload, so quoted or re-wrapped messages
  still decode. The older ``BEGINSLATEPACK.`` frame is accepted too.
- A ``slatepack`` CLI to armor, dearmor, verify and inspect messages.
"""

__version__ = "0.1"

from .armor import (
    ArmorConfig,
    ArmorInfo,
    armor,
    armor_bytes,
    armor_string,
    dearmor,
    dearmor_string,
    inspect,
    remove_armor,
)
from .errors import (
    SlatepackError,
    InvalidFraming,
    InvalidHeader,
    InvalidFooter,
    MalformedArmor,
    InvalidEncoding,
    ChecksumMismatch,
    TextEncodingError,
)

__all__ = [
    "ArmorConfig",
    "ArmorInfo",
    "armor",
    "armor_bytes",
    "armor_string",
    "dearmor",
    "dearmor_string",
    "inspect",
    "remove_armor",
    "SlatepackError",
    "InvalidFraming",
    "InvalidHeader",
    "InvalidFooter",
    "MalformedArmor",
    "InvalidEncoding",
    "ChecksumMismatch",
    "TextEncodingError",
]
