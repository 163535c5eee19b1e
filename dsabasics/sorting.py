"""Bubble sort and insertion sort."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any

BUBBLE_EXAMPLE: tuple[int, ...] = (64, 34, 25, 12, 22, 11, 5)
INSERTION_EXAMPLE: tuple[int, ...] = (12, 11, 13, 5, 6)


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, sorted by repeatedly swapping adjacent pairs."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, sorted by inserting each element into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the given integers, or the example array, and print the result."""
    parser = argparse.ArgumentParser(description="Sort an array of integers.")
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    parser.add_argument(
        "--method",
        choices=("bubble", "insertion"),
        default="bubble",
        help="sorting algorithm (default: bubble)",
    )
    args = parser.parse_args(argv)

    if args.method == "bubble":
        sort, example = bubble_sort, BUBBLE_EXAMPLE
    else:
        sort, example = insertion_sort, INSERTION_EXAMPLE
    values = args.values or example
    print("Sorted array: " + " ".join(str(value) for value in sort(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())