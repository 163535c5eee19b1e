"""Singly linked list that grows at its head."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

DEFAULT_VALUES: tuple[int, ...] = (10, 20, 30)


@dataclass
class _Node:
    data: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list where every insertion becomes the new head."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def insert(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "Linked List: " + "".join(f"{value} -> " for value in self) + "NULL"


def main(argv: Sequence[str] | None = None) -> int:
    """Insert the given integers, or the defaults, at the head and print the list."""
    parser = argparse.ArgumentParser(description="Build a linked list by head insertion.")
    parser.add_argument("values", nargs="*", type=int, help="integers to insert in order")
    args = parser.parse_args(argv)

    linked = LinkedList()
    for value in args.values or DEFAULT_VALUES:
        linked.insert(value)
    print(linked)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())