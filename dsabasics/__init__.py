"""Readable implementations of classic data structures and algorithms."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "searching",
    "sorting",
    "recursion",
    "linked_list",
    "binary_tree",
    "stack",
    "array_queue",
]