"""Command-line entry point: validate a list of integers given as one argument."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.checks import (
    all_in_int_range,
    has_duplicates,
    is_sorted,
    is_valid_numbers,
    parse_elements,
)
from pushswap.printf import printf


def main(argv: Sequence[str] | None = None) -> int:
    """Check the single argument and report the first problem found.

    Returns 1 when the argument count is wrong, 0 otherwise.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Error\n")
        return 1
    text = args[0]
    if not is_valid_numbers(text):
        printf("Error\n")
        return 0
    elements = parse_elements(text)
    if not elements:
        printf("Error list\n")
        return 0
    if not all_in_int_range(elements):
        printf("Not int\n")
        return 0
    if has_duplicates(elements):
        printf("Is duplicate!!\n")
        return 0
    if not is_sorted(elements):
        printf("Not order\n")
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())