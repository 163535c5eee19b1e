"""Linear and binary search over integer sequences."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

DEFAULT_ARRAY: tuple[int, ...] = (10, 20, 30, 40, 50)


def linear_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first element equal to ``key``, or None."""
    for index, item in enumerate(items):
        if item == key:
            return index
    return None


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending sequence ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == key:
            return mid
        if value < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def describe_result(index: int | None) -> str:
    """Describe the outcome of a search as a sentence."""
    if index is None:
        return "Element not found"
    return f"Element found at index {index}"


def main(argv: Sequence[str] | None = None) -> int:
    """Search for a key, read from the arguments or prompted for, and report the result."""
    parser = argparse.ArgumentParser(description="Search an array for an element.")
    parser.add_argument("key", nargs="?", type=int, help="element to search for")
    parser.add_argument(
        "--method",
        choices=("binary", "linear"),
        default="binary",
        help="search algorithm (default: binary)",
    )
    parser.add_argument(
        "--values",
        nargs="+",
        type=int,
        help="array to search; binary search expects it in ascending order",
    )
    args = parser.parse_args(argv)

    key = args.key
    if key is None:
        raw = input("Enter element to search: ")
        try:
            key = int(raw.strip())
        except ValueError:
            parser.error(f"invalid integer: {raw!r}")

    values = args.values or DEFAULT_ARRAY
    search = binary_search if args.method == "binary" else linear_search
    print(describe_result(search(values, key)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())