"""Command line front end for the binary search and ShearSort demonstrations."""

from __future__ import annotations

import argparse
import random
import sys
import time
from enum import Enum
from typing import TextIO

from gridsortlab.alt_shearsort import (
    alternative_shearsort,
    alternative_shearsort_parallel,
)
from gridsortlab.binary_search import binary_search, binary_search_parallel, random_list
from gridsortlab.matrix import format_matrix, random_matrix
from gridsortlab.mergesort import merge_sort
from gridsortlab.shearsort import shearsort, shearsort_parallel


class Variant(str, Enum):
    """The ShearSort implementations the command can run."""

    BASIC = "basic"
    PARALLEL = "parallel"
    ALTERNATIVE = "alternative"
    ALTERNATIVE_PARALLEL = "alternative-parallel"


_SORTERS = {
    Variant.BASIC: (shearsort, "ShearSort"),
    Variant.PARALLEL: (shearsort_parallel, "ShearSort"),
    Variant.ALTERNATIVE: (alternative_shearsort, "Alternative ShearSort"),
    Variant.ALTERNATIVE_PARALLEL: (alternative_shearsort_parallel, "Alternative ShearSort"),
}


def run_search(
    length: int = 20,
    parallel: bool = False,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> int | None:
    """Build a sorted random list, search for one of its values and report it.

    Returns the index found, or None.
    """
    if length < 1:
        raise ValueError(f"length must be at least 1, got {length}")
    rng = rng or random.Random()
    out = out or sys.stdout
    start = time.perf_counter()
    values = merge_sort(random_list(length, rng))
    target = values[rng.randrange(length)]
    label = "Parallel Binary Search" if parallel else "Binary Search"
    out.write("Sorted List: " + "".join(f"{value} " for value in values))
    out.write(f"\nSearching for {target} using {label}: ")
    index = binary_search_parallel(values, target) if parallel else binary_search(values, target)
    out.write(f"Found at index {index}\n" if index is not None else "Not Found\n")
    elapsed = time.perf_counter() - start
    out.write(f"Execution Time: {elapsed:f}\n")
    return index


def run_shearsort(
    size: int,
    variant: Variant | str = Variant.BASIC,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> list[list[int]]:
    """Sort a random ``size`` x ``size`` matrix with one variant and report it.

    Returns the sorted matrix.
    """
    sorter, title = _SORTERS[Variant(variant)]
    matrix = random_matrix(size, rng)
    out = out or sys.stdout
    out.write("\nOriginal matrix:\n")
    out.write(format_matrix(matrix))
    start = time.perf_counter()
    sorter(matrix)
    elapsed = time.perf_counter() - start
    out.write(f"Sorted matrix with {title}:\n")
    out.write(format_matrix(matrix))
    out.write(f"Execution time: {elapsed:f}\n")
    return matrix


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsortlab", description="Binary search and ShearSort demonstrations."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random values")
    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="binary search in a sorted random list")
    search.add_argument("--length", type=int, default=20)
    search.add_argument("--parallel", action="store_true")

    shear = commands.add_parser("shearsort", help="sort a random square matrix")
    shear.add_argument("--size", type=_non_negative, default=None)
    shear.add_argument(
        "--variant", choices=[v.value for v in Variant], default=Variant.BASIC.value
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    if args.command == "search":
        if args.length < 1:
            parser.error("--length must be at least 1")
        run_search(args.length, args.parallel, rng)
        return 0
    size = args.size
    if size is None:
        try:
            size = _non_negative(input("Enter the matrix size (n x n): ").strip())
        except (ValueError, argparse.ArgumentTypeError) as error:
            parser.error(f"invalid matrix size: {error}")
    run_shearsort(size, args.variant, rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())