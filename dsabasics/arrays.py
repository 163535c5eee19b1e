"""Traversal of an integer array, printing every element in order."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

DEFAULT_ARRAY: tuple[int, ...] = (10, 20, 30, 40, 50)


def format_elements(items: Iterable[object]) -> str:
    """Return the elements of ``items`` in order, after an "Array elements:" heading."""
    return "Array elements: " + " ".join(str(item) for item in items)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the elements of the given integers, or of the default array."""
    parser = argparse.ArgumentParser(description="Traverse an array and print its elements.")
    parser.add_argument("values", nargs="*", type=int, help="integers to traverse")
    args = parser.parse_args(argv)
    values = args.values or DEFAULT_ARRAY
    print(format_elements(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())