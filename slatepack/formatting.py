from __future__ import annotations

from .constants import WHITESPACE_CHARS, WORD_LENGTH, WORD_SEPARATOR

_STRIP_TABLE = str.maketrans("", "", WHITESPACE_CHARS)


def format_payload(encoded: str, width: int = WORD_LENGTH) -> str:
    """Split ``encoded`` into space separated words of ``width`` characters.

    Works on characters, not bytes. The last word may be shorter.
    """
    if width < 1:
        raise ValueError(f"word width must be >= 1 (got {width})")
    words = [encoded[i:i + width] for i in range(0, len(encoded), width)]
    return WORD_SEPARATOR.join(words)


def strip_formatting(text: str) -> str:
    """Remove every armor whitespace character ('>', newline, CR, tab, space)."""
    return text.translate(_STRIP_TABLE)
