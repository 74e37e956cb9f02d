# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""
Command-line entry point.

    python -m huecast hex "#ff0000"
    python -m huecast lab "lab(67% 43 74 / 0.5)" --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from huecast import __version__
from huecast.convert import ConverterConfig, convert
from huecast.schema import Notation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huecast",
        description="Convert a color between hex, RGB, float RGB, HSL and LAB.",
    )
    parser.add_argument(
        "notation",
        help="input notation: " + ", ".join(n.value for n in Notation),
    )
    parser.add_argument(
        "text",
        nargs="?",
        default="",
        help="color text; empty shows the default color",
    )
    parser.add_argument("--json", action="store_true", help="print JSON")
    parser.add_argument(
        "--places",
        type=int,
        default=ConverterConfig.places,
        help="decimal places for alpha and float RGB (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        notation = Notation.from_name(args.notation)
    except ValueError as e:
        parser.error(str(e))

    result = convert(notation, args.text, config=ConverterConfig(places=args.places))
    if not result.ok:
        print(f"error: {result.message}", file=sys.stderr)
        return 1

    if args.json:
        print(result.to_json())
    else:
        labels = ("hex", "rgba", "float", "hsla", "lab")
        for label, value in zip(labels, result.as_tuple()):
            print(f"{label:<6} {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
