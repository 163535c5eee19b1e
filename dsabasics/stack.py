"""Fixed-capacity stack backed by an array."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from typing import Any

DEFAULT_CAPACITY = 5
DEFAULT_VALUES: tuple[int, ...] = (10, 20, 30)


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive: {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Place ``value`` on top of the stack."""
        if len(self._items) == self.capacity:
            raise StackOverflowError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Stack is empty"
        return "Stack elements: " + " ".join(str(value) for value in self)


def main(argv: Sequence[str] | None = None) -> int:
    """Push values, show the stack, pop once and show it again."""
    parser = argparse.ArgumentParser(description="Exercise an array-backed stack.")
    parser.add_argument("values", nargs="*", type=int, help="integers to push")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY, help="stack capacity")
    args = parser.parse_args(argv)

    try:
        stack = ArrayStack(args.capacity)
    except ValueError as exc:
        parser.error(str(exc))

    for value in args.values or DEFAULT_VALUES:
        try:
            stack.push(value)
        except StackOverflowError as exc:
            print(exc)
    print(stack)
    try:
        print(f"Popped: {stack.pop()}")
    except StackUnderflowError as exc:
        print(exc)
    print(stack)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())