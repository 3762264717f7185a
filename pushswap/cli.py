"""Command line entry: read numbers, check them, print sorting instructions."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.cluster import cluster_sort
from pushswap.parsing import (
    InputError,
    check_duplicates,
    check_if_num,
    check_if_sorted,
    parse_values,
)
from pushswap.small_sort import sort_five
from pushswap.stacks import Stacks


def _load(args: list[str]) -> list[int]:
    values = parse_values(args)
    if not check_if_num(args) or not check_duplicates(args):
        raise InputError()
    if check_if_sorted(args):
        raise InputError("already sorted", show=False)
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Print the instructions that sort the given numbers; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = _load(args)
    except InputError as error:
        if error.show:
            sys.stderr.write("Error\n")
        return 1
    stacks = Stacks(values)
    if len(stacks.a) <= 5:
        sort_five(stacks)
    else:
        cluster_sort(stacks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())