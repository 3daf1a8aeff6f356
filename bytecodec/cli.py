"""Simple CLI for converting between UTF-8 text, hex and Base64.

Usage examples:
  # Hex to Base64
  bytecodec convert --from hex --to base64 49276d206b696c6c696e67

  # Base64 to text, reading the input from stdin
  echo SGVsbG8= | bytecodec convert --from base64 --to utf8

  # Run the built-in hex -> Base64 test vector
  bytecodec check
"""
from __future__ import annotations

import sys
import logging
import argparse
from collections.abc import Callable

from .b64 import base64_encode, base64_decode
from .constants import B64_EXPECTED
from .errors import CodecError
from .hexcodec import hex_encode, hex_decode
from .utf8 import utf8_encode, utf8_decode
from .vectors import run_vector

FORMATS: tuple[str, ...] = ("utf8", "hex", "base64")

_TEXT_TO_BYTES: dict[str, Callable[[str], bytes]] = {
    "utf8": utf8_encode,
    "hex": hex_decode,
    "base64": base64_decode,
}

_BYTES_TO_TEXT: dict[str, Callable[[bytes], str]] = {
    "utf8": utf8_decode,
    "hex": hex_encode,
    "base64": base64_encode,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bytecodec", description="Convert between UTF-8 text, hex and Base64")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    conv = sub.add_parser("convert", help="Decode DATA from one format and encode it into another")
    conv.add_argument("--from", dest="src", choices=FORMATS, required=True, help="Format of DATA")
    conv.add_argument("--to", dest="dst", choices=FORMATS, required=True, help="Output format")
    conv.add_argument("data", nargs="?", help="Input text; read from stdin if omitted")

    sub.add_parser("check", help="Run the hex -> Base64 test vector")

    return p


def cmd_convert(args: argparse.Namespace) -> int:
    text: str = args.data if args.data is not None else sys.stdin.read().rstrip("\r\n")
    raw = _TEXT_TO_BYTES[args.src](text)
    print(_BYTES_TO_TEXT[args.dst](raw))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    decoded, encoded = run_vector()
    print(f"Hex decoded test: {decoded!r}")
    print(f"Base64 encoded test: {encoded}")
    print(f"Base64 expected output: {B64_EXPECTED}")
    if encoded != B64_EXPECTED:
        print("error: test vector mismatch", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    try:
        if args.cmd == "convert":
            code = cmd_convert(args)
        elif args.cmd == "check":
            code = cmd_check(args)
        else:
            code = 2
    except (CodecError, TypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        code = 2
    raise SystemExit(code)


if __name__ == "__main__":
    main()
