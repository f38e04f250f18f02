from __future__ import annotations

import argparse
import os
import random
import sys
from typing import List, Optional

from slatepack.base58check import ALPHABET
from slatepack.constants import FRAME_DELIMITER, WHITESPACE_CHARS
from slatepack.errors import SlatepackError
from slatepack.framing import parse_frame


def _payload_positions(text: str) -> List[int]:
    """Absolute offsets of the Base58 characters inside the payload segment."""
    parse_frame(text)
    start = text.index(FRAME_DELIMITER) + 1
    end = text.index(FRAME_DELIMITER, start)
    return [i for i in range(start, end) if text[i] not in WHITESPACE_CHARS]


def _substitute(text: str, pos: int, shift: int = 1) -> str:
    ch = text[pos]
    repl = ALPHABET[(ALPHABET.index(ch) + shift) % len(ALPHABET)]
    return text[:pos] + repl + text[pos + 1:]


def _load(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _store(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
        f.flush()
        os.fsync(f.fileno())


def _flip_byte(path: str, offset: int, xor_val: int = 0xFF) -> None:
    if offset < 0:
        raise ValueError("Offset must be non-negative")
    with open(path, "r+b") as f:
        f.seek(offset)
        b = f.read(1)
        if not b:
            raise ValueError("Offset beyond end of file")
        f.seek(offset)
        f.write(bytes([b[0] ^ (xor_val & 0xFF)]))
        f.flush()
        os.fsync(f.fileno())


def cmd_by_offset(args: argparse.Namespace) -> None:
    _flip_byte(args.armored, args.offset, xor_val=args.xor)
    print(f"Flipped 1 byte at offset {args.offset}")


def cmd_char(args: argparse.Namespace) -> None:
    text = _load(args.armored)
    positions = _payload_positions(text)
    idx = args.index
    if idx < 0 or idx >= len(positions):
        raise ValueError(f"Payload character index out of range (0..{len(positions)-1})")
    if args.shift % len(ALPHABET) == 0:
        raise ValueError("--shift must not be a multiple of the alphabet size")
    _store(args.armored, _substitute(text, positions[idx], args.shift))
    print(f"Substituted payload character {idx}")


def cmd_random(args: argparse.Namespace) -> None:
    rng = random.Random(args.seed)
    text = _load(args.armored)
    positions = _payload_positions(text)
    if not positions:
        raise ValueError("Armored payload is empty")
    count = min(args.count, len(positions))
    for pos in rng.sample(positions, count):
        text = _substitute(text, pos, rng.randrange(1, len(ALPHABET)))
    _store(args.armored, text)
    print(f"Substituted {count} payload character(s) at random positions")


def main(argv: Optional[list[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="slatepack.corrupt", description="Corrupt armored slates for testing")
    sub = ap.add_subparsers(dest="cmd", required=False)

    p_off = sub.add_parser("by-offset", help="XOR one byte at an absolute file offset")
    p_off.add_argument("armored", help="Path to armored text file")
    p_off.add_argument("--offset", type=int, required=True, help="Absolute byte offset in file")
    p_off.add_argument("--xor", type=lambda x: int(x, 0), default=0xFF, help="XOR mask to apply (default 0xFF)")
    p_off.set_defaults(func=cmd_by_offset)

    p_char = sub.add_parser("char", help="Replace one payload character with another Base58 character")
    p_char.add_argument("armored", help="Path to armored text file")
    p_char.add_argument("--index", type=int, default=0, help="Payload character index, whitespace excluded (default 0)")
    p_char.add_argument("--shift", type=int, default=1, help="Alphabet positions to rotate the character by (default 1)")
    p_char.set_defaults(func=cmd_char)

    p_rand = sub.add_parser("random", help="Replace N random payload characters")
    p_rand.add_argument("armored", help="Path to armored text file")
    p_rand.add_argument("--count", type=int, default=1, help="Number of characters to replace (default 1)")
    p_rand.add_argument("--seed", type=int, default=None, help="PRNG seed for reproducibility")
    p_rand.set_defaults(func=cmd_random)

    # Pre-dispatch: a bare path (no subcommand) runs the random mode
    subcommands = {"by-offset", "char", "random"}
    if argv is None:
        argv = sys.argv[1:]
    if argv and (argv[0] not in subcommands) and (not argv[0].startswith("-")):
        argv = ["random"] + list(argv)

    args = ap.parse_args(argv)
    if args.cmd is None:
        ap.print_help()
        sys.exit(2)
    try:
        args.func(args)
    except (SlatepackError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
