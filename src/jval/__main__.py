"""
Command-line JSON validator and formatter.

    python -m jval [FILE] [--pretty | --check]

Exit codes: 0 on success, 1 on a parse error, 2 when the input cannot be read.
"""

import argparse
import logging
import sys

from jval._errors import ParseError
from jval._parser import parse
from jval._stringify import stringify

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_READ_ERROR = 2


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fp:
        return fp.read()


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="jval", description="Validate and reformat JSON documents."
    )
    ap.add_argument(
        "file",
        nargs="?",
        default="-",
        help="JSON file to read (default: stdin)",
    )
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument(
        "--pretty",
        action="store_true",
        help="indent output four spaces per level",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="only validate; print OK on success",
    )
    args = ap.parse_args(argv)

    try:
        text = _read_input(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_READ_ERROR

    try:
        value = parse(text)
    except ParseError as exc:
        logger.debug("parse of %s failed: %r", args.file, exc.kind)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    if args.check:
        print("OK")
    else:
        print(stringify(value, pretty=args.pretty))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
