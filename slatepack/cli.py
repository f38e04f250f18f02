from __future__ import annotations

import sys
import argparse
import json as _json

from pathlib import Path
from typing import List, Optional

from slatepack.armor import ArmorConfig, armor_bytes, dearmor, dearmor_string, inspect
from slatepack.constants import FRAME_BARE, FRAME_QUALIFIED, WORD_LENGTH
from slatepack.errors import (
    SlatepackError,
    InvalidFraming,
    MalformedArmor,
    InvalidEncoding,
    ChecksumMismatch,
)
from slatepack.minify import minify_json


def _read_input(path: str) -> bytes:
    """Read raw bytes from ``path``, or from stdin when ``path`` is '-'."""
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _read_armor(path: str) -> str:
    data = _read_input(path)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"armored input is not UTF-8 text: {exc}") from exc


def _write_output(path: Optional[str], data: bytes) -> None:
    """Write ``data`` to ``path``, or to stdout when ``path`` is None or '-'."""
    if path is None or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    Path(path).write_bytes(data)


def cmd_armor(
    input_path: str = "-",
    *,
    output: Optional[str] = None,
    bare: bool = False,
    width: int = WORD_LENGTH,
    format_name: Optional[str] = None,
    minify: bool = False,
    quiet: bool = False,
) -> bool:
    """Armor a slate file.

    Args:
        input_path: Slate file to read ('-' for stdin).
        output: Destination for the armored text (stdout when omitted).
        bare: Emit the older ``BEGINSLATEPACK.`` frame.
        width: Characters per payload word.
        format_name: Optional qualifier placed between BEGIN/END and SLATEPACK.
        minify: Treat the input as UTF-8 JSON and strip insignificant whitespace first.
        quiet: Suppress the summary line.
    """
    payload = _read_input(input_path)
    if minify:
        try:
            text = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"--json input is not UTF-8 text: {exc}") from exc
        payload = minify_json(text).encode("utf-8")
    config = ArmorConfig(word_wrap_width=width, frame_variant=FRAME_BARE if bare else FRAME_QUALIFIED)
    armored = armor_bytes(payload, config=config, format_name=format_name)
    _write_output(output, (armored + "\n").encode("utf-8"))
    if output not in (None, "-") and not quiet:
        print(f"Armored {len(payload)} byte(s) into {len(armored)} character(s): {output}")
    return True


def cmd_dearmor(
    input_path: str = "-",
    *,
    output: Optional[str] = None,
    text: bool = False,
    encoding: str = "utf-8",
    quiet: bool = False,
) -> bool:
    """Recover the slate carried by an armored file.

    With ``text`` the payload must decode in ``encoding``; it is re-encoded as
    UTF-8 on output.
    """
    armored = _read_armor(input_path)
    if text:
        data = dearmor_string(armored, encoding=encoding).encode("utf-8")
    else:
        data = dearmor(armored)
    _write_output(output, data)
    if output not in (None, "-") and not quiet:
        print(f"Recovered {len(data)} byte(s): {output}")
    return True


def cmd_verify(input_path: str = "-") -> bool:
    """Check framing, encoding and checksum of an armored file.

    Prints:
        "OK" on success, "FAIL: <reason>" otherwise.
    """
    armored = _read_armor(input_path)
    try:
        dearmor(armored)
    except MalformedArmor as exc:
        print(f"FAIL: malformed armor: {exc}")
        return False
    except InvalidFraming as exc:
        print(f"FAIL: bad framing: {exc}")
        return False
    except InvalidEncoding as exc:
        print(f"FAIL: bad encoding: {exc}")
        return False
    except ChecksumMismatch as exc:
        print(f"FAIL: checksum mismatch: {exc}")
        return False
    print("OK")
    return True


def cmd_info(input_path: str = "-", *, as_json: bool = False) -> bool:
    """Print frame and payload details for an armored file."""
    info = inspect(_read_armor(input_path))
    if as_json:
        print(
            _json.dumps(
                {
                    "variant": info.variant,
                    "format_name": info.format_name,
                    "payload_size": info.payload_size,
                    "checksum": info.checksum.hex(),
                    "encoded_length": info.encoded_length,
                }
            )
        )
        return True
    print(f"Frame: {info.variant}")
    print(f"  Format name: {info.format_name or '-'}")
    print(f"  Payload size: {info.payload_size}")
    print(f"  Checksum: {info.checksum.hex()}")
    print(f"  Encoded length: {info.encoded_length}")
    return True


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="slatepack",
        description="Slatepack armor tool",
        epilog="Armored payloads carry a 4-byte double SHA-256 checksum; corruption is reported, never repaired.",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_armor = sub.add_parser("armor", help="Armor a slate")
    ap_armor.add_argument("input", nargs="?", default="-", help="Slate file (default: stdin)")
    ap_armor.add_argument("-o", "--output", help="Output path (default: stdout)")
    ap_armor.add_argument("--bare", action="store_true", help="Use the BEGINSLATEPACK./ENDSLATEPACK. frame")
    ap_armor.add_argument("--width", type=int, default=WORD_LENGTH, help=f"Characters per word (default {WORD_LENGTH})")
    ap_armor.add_argument("--format-name", help="Alphanumeric qualifier, e.g. BINARY -> 'BEGIN BINARY SLATEPACK.'")
    ap_armor.add_argument("--json", action="store_true", help="Minify JSON input before armoring")
    ap_armor.add_argument("--quiet", help="limit outputs to the armored text only", action="store_true")

    ap_dearmor = sub.add_parser("dearmor", help="Recover a slate from armored text")
    ap_dearmor.add_argument("input", nargs="?", default="-", help="Armored file (default: stdin)")
    ap_dearmor.add_argument("-o", "--output", help="Output path (default: stdout)")
    ap_dearmor.add_argument("--text", action="store_true", help="Require the payload to be valid text")
    ap_dearmor.add_argument("--encoding", default="utf-8", help="Payload text encoding for --text (default utf-8)")
    ap_dearmor.add_argument("--quiet", help="limit outputs to the payload only", action="store_true")

    ap_verify = sub.add_parser("verify", help="Verify armored text integrity")
    ap_verify.add_argument("input", nargs="?", default="-", help="Armored file (default: stdin)")

    ap_info = sub.add_parser("info", help="Show armored message information")
    ap_info.add_argument("input", nargs="?", default="-", help="Armored file (default: stdin)")
    ap_info.add_argument("--json", action="store_true", help="Emit JSON")

    args = ap.parse_args(argv)
    try:
        if args.cmd == "armor":
            cmd_armor(
                args.input,
                output=args.output,
                bare=args.bare,
                width=args.width,
                format_name=args.format_name,
                minify=args.json,
                quiet=args.quiet,
            )
        elif args.cmd == "dearmor":
            cmd_dearmor(args.input, output=args.output, text=args.text, encoding=args.encoding, quiet=args.quiet)
        elif args.cmd == "verify":
            ok = cmd_verify(args.input)
            sys.exit(0 if ok else 1)
        elif args.cmd == "info":
            cmd_info(args.input, as_json=args.json)
        else:
            raise RuntimeError("Unknown command")
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except LookupError as e:
        print(f"Error: unknown encoding: {e}", file=sys.stderr)
        sys.exit(2)
    except (SlatepackError, OSError, ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
