"""
Command-line validator: ``python -m jcheck [FILE ...]``.

Reads each file (or standard input) as bytes and reports whether it is a
conformant JSON document. Exits 0 when every input is valid, 1 when any
input is rejected and 2 when any input cannot be read.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

import jcheck

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2

STDIN_NAME = "-"


def _positive_int(value: str) -> int:
    depth = int(value)
    if depth < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return depth


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jcheck", description="Validate JSON documents (RFC 8259)."
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="documents to validate; '-' or nothing reads standard input",
    )
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=jcheck.DEFAULT_MAX_DEPTH,
        help="maximum container nesting depth (default: %(default)s)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="only report failures"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=jcheck.__version__
    )
    return parser


def _read_input(name: str) -> bytes:
    if name == STDIN_NAME:
        return sys.stdin.buffer.read()
    with open(name, "rb") as fp:
        return fp.read()


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    status = EXIT_OK
    for name in args.files or [STDIN_NAME]:
        label = "<stdin>" if name == STDIN_NAME else name
        try:
            data = _read_input(name)
        except OSError as exc:
            print(f"{label}: {exc.strerror or exc}", file=sys.stderr)
            status = max(status, EXIT_UNREADABLE)
            continue

        try:
            jcheck.check(data, max_depth=args.max_depth)
        except jcheck.ValidationError as exc:
            print(f"{label}: {exc}", file=sys.stderr)
            status = max(status, EXIT_INVALID)
            continue

        if not args.quiet:
            print(f"{label}: OK")

    return status


if __name__ == "__main__":
    sys.exit(main())
