"""Armor and dearmor slate payloads.

Armoring turns arbitrary bytes into a framed, checksum protected, word
wrapped Base58 message that survives chat, email and clipboard transport::

    BEGIN SLATEPACK. <15 chars> <15 chars> ... <rest> . END SLATEPACK.

Dearmoring accepts the same message reformatted with any mix of '>', spaces,
tabs and line breaks around the framing tokens and inside the payload, and
rejects it if the checksum no longer matches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import base58check
from .constants import DEFAULT_FRAME_VARIANT, FRAME_VARIANTS, WORD_LENGTH
from .errors import ChecksumMismatch, TextEncodingError
from .formatting import format_payload, strip_formatting
from .framing import get_grammar, parse_frame
from .hashutil import generate_check, verify_check


@dataclass(frozen=True)
class ArmorConfig:
    word_wrap_width: int = WORD_LENGTH
    frame_variant: str = DEFAULT_FRAME_VARIANT

    def __post_init__(self) -> None:
        if self.word_wrap_width < 1:
            raise ValueError(f"word_wrap_width must be >= 1 (got {self.word_wrap_width})")
        if self.frame_variant not in FRAME_VARIANTS:
            raise ValueError(
                f"unknown frame variant {self.frame_variant!r}; expected one of {', '.join(FRAME_VARIANTS)}"
            )


DEFAULT_CONFIG = ArmorConfig()


@dataclass(frozen=True)
class ArmorInfo:
    variant: str
    format_name: Optional[str]
    checksum: bytes
    encoded_length: int
    payload: bytes

    @property
    def payload_size(self) -> int:
        return len(self.payload)


def armor_bytes(payload: bytes, *, config: Optional[ArmorConfig] = None, format_name: Optional[str] = None) -> str:
    """Return the armored text for ``payload``.

    Args:
        payload: Raw slate bytes; never interpreted.
        config: Word width and frame variant; defaults to 15 and the qualified frame.
        format_name: Optional alphanumeric qualifier (``BEGIN <NAME> SLATEPACK``).
            Only valid with the qualified frame.
    """
    cfg = config or DEFAULT_CONFIG
    grammar = get_grammar(cfg.frame_variant)
    header = grammar.header_token(format_name)
    footer = grammar.footer_token(format_name)
    formatted = format_payload(base58check.encode(payload), cfg.word_wrap_width)
    return f"{header}. {formatted} . {footer}."


def armor(payload: bytes) -> str:
    return armor_bytes(payload)


def armor_string(text: str, *, encoding: str = "utf-8", config: Optional[ArmorConfig] = None, format_name: Optional[str] = None) -> str:
    """Armor a text slate (typically JSON) after encoding it to bytes."""
    return armor_bytes(text.encode(encoding), config=config, format_name=format_name)


def _unpack(text: str):
    frame = parse_frame(text)
    encoded = strip_formatting(frame.payload)
    check, payload = base58check.decode(encoded)
    if not verify_check(check, payload):
        raise ChecksumMismatch(
            f"Bad slate error code {check.hex()} (expected {generate_check(payload).hex()}); "
            "some data was corrupted"
        )
    return frame, encoded, check, payload


def dearmor(text: str) -> bytes:
    """Return the payload carried by armored ``text``.

    Raises:
        MalformedArmor: the '.' delimiters are missing.
        InvalidHeader / InvalidFooter: a framing token is not recognised.
        InvalidEncoding: the payload is not Base58 or is too short for a checksum.
        ChecksumMismatch: the payload does not match its checksum.
    """
    return _unpack(text)[3]


remove_armor = dearmor


def dearmor_string(text: str, encoding: str = "utf-8") -> str:
    payload = dearmor(text)
    try:
        return payload.decode(encoding)
    except UnicodeDecodeError as exc:
        raise TextEncodingError(f"Slate payload is not valid {encoding} text: {exc}") from exc


def inspect(text: str) -> ArmorInfo:
    frame, encoded, check, payload = _unpack(text)
    return ArmorInfo(
        variant=frame.variant,
        format_name=frame.format_name,
        checksum=check,
        encoded_length=len(encoded),
        payload=payload,
    )
