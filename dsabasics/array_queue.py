"""Fixed-capacity linear queue backed by an array."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from itertools import islice
from typing import Any

DEFAULT_CAPACITY = 5
DEFAULT_VALUES: tuple[int, ...] = (10, 20, 30)


class QueueOverflowError(Exception):
    """Raised when enqueuing into a queue whose slots are used up."""


class QueueUnderflowError(Exception):
    """Raised when dequeuing from an empty queue."""


class ArrayQueue:
    """A linear array queue with ``capacity`` slots.

    Slots are not reused: once ``capacity`` values have been enqueued the
    queue reports overflow, even if some of them have since been dequeued.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive: {capacity}")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear of the queue."""
        if len(self._slots) == self.capacity:
            raise QueueOverflowError("Queue Overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self._front >= len(self._slots):
            raise QueueUnderflowError("Queue Underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return islice(self._slots, self._front, None)

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __str__(self) -> str:
        if not len(self):
            return "Queue is empty"
        return "Queue elements: " + " ".join(str(value) for value in self)


def main(argv: Sequence[str] | None = None) -> int:
    """Enqueue values, show the queue, dequeue once and show it again."""
    parser = argparse.ArgumentParser(description="Exercise an array-backed queue.")
    parser.add_argument("values", nargs="*", type=int, help="integers to enqueue")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY, help="queue capacity")
    args = parser.parse_args(argv)

    try:
        queue = ArrayQueue(args.capacity)
    except ValueError as exc:
        parser.error(str(exc))

    for value in args.values or DEFAULT_VALUES:
        try:
            queue.enqueue(value)
        except QueueOverflowError as exc:
            print(exc)
    print(queue)
    try:
        print(f"Dequeued: {queue.dequeue()}")
    except QueueUnderflowError as exc:
        print(exc)
    print(queue)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())