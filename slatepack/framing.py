from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    FOOTER_KEYWORD,
    FRAME_BARE,
    FRAME_DELIMITER,
    FRAME_KEYWORD,
    FRAME_QUALIFIED,
    HEADER_KEYWORD,
    WHITESPACE_CHARS,
)
from .errors import InvalidEncoding, InvalidFooter, InvalidHeader, MalformedArmor

_WS = "[" + re.escape(WHITESPACE_CHARS) + "]"


@dataclass(frozen=True)
class FrameGrammar:
    """Header/footer patterns and output literals for one frame variant."""

    name: str
    header_re: re.Pattern[str]
    footer_re: re.Pattern[str]

    def header_token(self, format_name: Optional[str] = None) -> str:
        return _token(self.name, HEADER_KEYWORD, format_name)

    def footer_token(self, format_name: Optional[str] = None) -> str:
        return _token(self.name, FOOTER_KEYWORD, format_name)


@dataclass(frozen=True)
class FrameMatch:
    variant: str
    format_name: Optional[str] = None


@dataclass(frozen=True)
class ArmorFrame:
    header: str
    payload: str
    footer: str
    header_match: FrameMatch
    footer_match: FrameMatch

    @property
    def variant(self) -> str:
        return self.header_match.variant

    @property
    def format_name(self) -> Optional[str]:
        return self.header_match.format_name


def _token(variant: str, keyword: str, format_name: Optional[str]) -> str:
    if variant == FRAME_BARE:
        if format_name:
            raise ValueError("bare frames cannot carry a format name")
        return keyword + FRAME_KEYWORD
    if format_name:
        if not is_format_name(format_name):
            raise ValueError(f"format name must be ASCII alphanumeric (got {format_name!r})")
        return f"{keyword} {format_name} {FRAME_KEYWORD}"
    return f"{keyword} {FRAME_KEYWORD}"


def _qualified(keyword: str) -> re.Pattern[str]:
    return re.compile(
        rf"{_WS}*{keyword}{_WS}+(?:(?P<name>[a-zA-Z0-9]+){_WS}+)?{FRAME_KEYWORD}{_WS}*"
    )


def _bare(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"{_WS}*{keyword}{FRAME_KEYWORD}{_WS}*")


_FORMAT_NAME_RE = re.compile(r"[a-zA-Z0-9]+")

# Tried in this order; compiled once at import and never mutated.
GRAMMARS: Tuple[FrameGrammar, ...] = (
    FrameGrammar(FRAME_QUALIFIED, _qualified(HEADER_KEYWORD), _qualified(FOOTER_KEYWORD)),
    FrameGrammar(FRAME_BARE, _bare(HEADER_KEYWORD), _bare(FOOTER_KEYWORD)),
)


def is_format_name(name: str) -> bool:
    return _FORMAT_NAME_RE.fullmatch(name) is not None


def get_grammar(variant: str) -> FrameGrammar:
    for grammar in GRAMMARS:
        if grammar.name == variant:
            return grammar
    raise ValueError(f"unknown frame variant: {variant!r}")


def _match(text: str, footer: bool) -> Optional[FrameMatch]:
    for grammar in GRAMMARS:
        m = (grammar.footer_re if footer else grammar.header_re).fullmatch(text)
        if m is not None:
            return FrameMatch(grammar.name, m.groupdict().get("name"))
    return None


def match_header(text: str) -> Optional[FrameMatch]:
    return _match(text, footer=False)


def match_footer(text: str) -> Optional[FrameMatch]:
    return _match(text, footer=True)


def check_header(text: str) -> FrameMatch:
    m = match_header(text)
    if m is None:
        raise InvalidHeader(f"Bad armor header: {text.strip(WHITESPACE_CHARS)[:40]!r}")
    return m


def check_footer(text: str) -> FrameMatch:
    m = match_footer(text)
    if m is None:
        raise InvalidFooter(f"Bad armor footer: {text.strip(WHITESPACE_CHARS)[:40]!r}")
    return m


def _reject_stray_delimiter(text: str, payload_start: int, pos: int) -> None:
    # A corrupted payload character may read as '.'; the real footer then
    # follows one of the later delimiters.
    while pos >= 0:
        end = text.find(FRAME_DELIMITER, pos + 1)
        candidate = text[pos + 1:] if end < 0 else text[pos + 1:end]
        if match_footer(candidate) is not None:
            stray = text.index(FRAME_DELIMITER, payload_start)
            raise InvalidEncoding(
                f"Invalid Base58 character '.' at offset {stray - payload_start} of the payload"
            )
        pos = end


def parse_frame(text: str) -> ArmorFrame:
    """Split armored text into header, payload and footer segments.

    The header ends at the first '.', the payload at the second, and the
    footer at the third '.' or the end of the input. Anything after the
    footer's '.' is ignored.

    Raises:
        MalformedArmor: fewer than two '.' delimiters are present.
        InvalidHeader / InvalidFooter: a framing token matches no grammar.
        InvalidEncoding: a '.' sits inside the payload, i.e. a valid footer
            follows a later delimiter.
    """
    if text.count(FRAME_DELIMITER) < 2:
        raise MalformedArmor(
            "Armored text must contain a header, payload and footer separated by '.'"
        )

    # ReadingHeader
    header_end = text.index(FRAME_DELIMITER)
    header = text[:header_end]
    header_match = check_header(header)

    # ReadingPayload
    payload_start = header_end + 1
    payload_end = text.index(FRAME_DELIMITER, payload_start)
    payload = text[payload_start:payload_end]

    # ReadingFooter
    footer_start = payload_end + 1
    footer_end = text.find(FRAME_DELIMITER, footer_start)
    footer = text[footer_start:] if footer_end < 0 else text[footer_start:footer_end]
    footer_match = match_footer(footer)
    if footer_match is None:
        _reject_stray_delimiter(text, payload_start, footer_end)
        footer_match = check_footer(footer)

    return ArmorFrame(
        header=header,
        payload=payload,
        footer=footer,
        header_match=header_match,
        footer_match=footer_match,
    )
