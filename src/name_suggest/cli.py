"""Command-line interface.

    name-suggest instakk update install
    The `instakk` input is similar to `install`.

Exit status
-----------
- 0: a similar value was found.
- 1: the input already exists in the values, or nothing similar was found.
- 2: usage error (argparse).
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .adapters import suggest_with_dist
from .distance import KERNEL_NAMES
from .logconfig import setup_logging
from .matching import Matcher
from .threshold import ThresholdPolicy

logger = logging.getLogger(__name__)

SUCCESS = 0
FAILURE = 1


def cli() -> None:
    """Console-script entry point."""
    raise SystemExit(main())


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError("distance must be >= 0")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="name-suggest",
        description="Check whether an input is similar to one of the given values.",
    )
    parser.add_argument("input", help="Input to check if a similar name exists.")
    parser.add_argument("values", nargs="*", help="Values of similar names.")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Disable console outputs.",
    )
    parser.add_argument(
        "-d",
        "--distance",
        type=_non_negative_int,
        default=None,
        help=(
            "Maximum Levenshtein distance. If omitted, it is derived from the input "
            "length (see NAME_SUGGEST_THRESHOLD_FLOOR / NAME_SUGGEST_THRESHOLD_DIVISOR)."
        ),
    )
    parser.add_argument(
        "--kernel",
        choices=list(KERNEL_NAMES),
        default="python",
        help="Edit distance implementation. Default: python.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (stderr). Default: WARNING.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.input in args.values:
        if not args.quiet:
            print(f"The same value with the `{args.input}` input exists.", file=sys.stderr)
        return FAILURE

    try:
        matcher = Matcher(policy=ThresholdPolicy.from_env(), kernel=args.kernel)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    logger.debug("Matching %r against %d values", args.input, len(args.values))

    try:
        sugg = suggest_with_dist(args.values, args.input, args.distance, matcher=matcher)
    except ModuleNotFoundError as e:
        raise SystemExit(
            "rapidfuzz is not installed. Install with: pip install rapidfuzz"
        ) from e

    if sugg is not None:
        if not args.quiet:
            print(f"The `{args.input}` input is similar to `{sugg}`.")
        return SUCCESS

    if not args.quiet:
        print(f"No similar value for the `{args.input}` input was found.")
    return FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
