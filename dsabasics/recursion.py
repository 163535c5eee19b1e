"""Factorial computed by recursion."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def factorial(n: int) -> int:
    """Return n! computed recursively; ``n`` must be non-negative."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def main(argv: Sequence[str] | None = None) -> int:
    """Compute the factorial of a number, read from the arguments or prompted for."""
    parser = argparse.ArgumentParser(description="Compute a factorial recursively.")
    parser.add_argument("number", nargs="?", type=int, help="non-negative integer")
    args = parser.parse_args(argv)

    number = args.number
    if number is None:
        raw = input("Enter number: ")
        try:
            number = int(raw.strip())
        except ValueError:
            parser.error(f"invalid integer: {raw!r}")

    try:
        result = factorial(number)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Factorial = {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())