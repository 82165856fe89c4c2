#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import List

from modules.byte_convert.core.convert import convert
from modules.byte_convert.core.errors import ConversionError
from modules.byte_convert.core.formats import ALIASES, Format
from modules.byte_convert.core.random_bytes import generate_random_bytes
from universe.logger import setup_logger

FORMAT_CHOICES = [item.value for item in Format] + sorted(ALIASES)

BASE_EPILOG = """\
examples:
  # convert decimal to hex
  byte-convert base -t hex -u 12345

  # convert base64 to ascii
  byte-convert base -f b64 -t ascii VGhlIHF1aWNrIGJyb3duIGZveA==

  # convert individual bytes from hex to binary
  byte-convert base -f hex -t bin AB CD 01 23
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="byte-convert", description="Convert numbers and bytes between formats."
    )
    parser.add_argument(
        "--trim", action="store_true", help="Do not print a trailing newline"
    )
    parser.add_argument("--log-level", help="Log level, e.g. DEBUG")
    subparsers = parser.add_subparsers(dest="command", required=True)

    base = subparsers.add_parser(
        "base",
        help="Convert numbers between different bases",
        description=(
            "Convert the input number to another number base. Input may be "
            "supplied as a single number, or as a space-delimited list of bytes."
        ),
        epilog=BASE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    base.add_argument("input", nargs="*", help="Number or bytes to be converted")
    base.add_argument(
        "-f", "--from", dest="source", default="dec", choices=FORMAT_CHOICES,
        metavar="FORMAT", help="Input format (default: dec)",
    )
    base.add_argument(
        "-t", "--to", dest="target", default="dec", choices=FORMAT_CHOICES,
        metavar="FORMAT", help="Output format (default: dec)",
    )
    base.add_argument(
        "-u", "--upper", action="store_true",
        help="Use upper case characters for hex output",
    )

    rnd = subparsers.add_parser("rnd", help="Generate random bytes of data")
    rnd.add_argument("count", help="Number of bytes to generate")
    rnd.add_argument(
        "-f", "--format", default="hex", choices=["hex", "b64", "base64"],
        help="Output format (default: hex)",
    )
    rnd.add_argument(
        "-u", "--upper", action="store_true",
        help="Use upper case characters for hex output",
    )
    return parser


def run(args: argparse.Namespace) -> str:
    if args.command == "rnd":
        result, error = generate_random_bytes(args.count, args.format, upper=args.upper)
        if error or result is None:
            raise ConversionError(error or "Unable to generate bytes.")
        return result["value"]
    return convert(args.input, args.source, args.target, upper=args.upper)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger(args.log_level)

    try:
        output = run(args)
    except ConversionError as exc:
        print(f"error: {exc.detail}", file=sys.stderr)
        return 1

    if args.trim:
        sys.stdout.write(output)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
