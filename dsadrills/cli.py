"""Command line entry point for a handful of the drills."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from dsadrills.arrays_advanced import has_pair_with_sum
from dsadrills.arrays_basic import min_max
from dsadrills.linked import LinkedList
from dsadrills.strings import duplicate_counts

__all__ = ["main"]


def _digits(text: str) -> list[int]:
    if not text or not text.isdigit():
        raise argparse.ArgumentTypeError(f"not a sequence of digits: {text!r}")
    return [int(ch) for ch in text]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsadrills", description="Run a drill.")
    commands = parser.add_subparsers(dest="command", required=True)

    extremes = commands.add_parser("minmax", help="largest and smallest value")
    extremes.add_argument("values", nargs="+", type=int)

    pair = commands.add_parser(
        "pair-sum", help="does a rotated sorted array hold a pair with a given sum"
    )
    pair.add_argument("--sum", dest="total", type=int, required=True)
    pair.add_argument("values", nargs="+", type=int)

    multiply = commands.add_parser(
        "multiply", help="multiply two numbers held digit by digit in linked lists"
    )
    multiply.add_argument("first", type=_digits)
    multiply.add_argument("second", type=_digits)

    duplicates = commands.add_parser(
        "duplicates", help="characters that occur more than once"
    )
    duplicates.add_argument("text")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the drill named on the command line and print its result."""
    args = _parser().parse_args(argv)
    try:
        if args.command == "minmax":
            extremes = min_max(args.values)
            print(f"The maximum value in the array is:- {extremes.maximum}")
            print(f"The minimum value in the array is:- {extremes.minimum}")
        elif args.command == "pair-sum":
            found = has_pair_with_sum(args.values, args.total)
            print("true" if found else "false")
        elif args.command == "multiply":
            first = LinkedList(args.first).to_number()
            second = LinkedList(args.second).to_number()
            print(first * second)
        else:
            for ch, count in duplicate_counts(args.text).items():
                print(f"{ch}, count is: {count}")
    except ValueError as error:
        print(f"dsadrills: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())