"""Binary tree nodes and inorder traversal."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """A binary tree node holding a value and optional children."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def inorder(root: Node | None) -> Iterator[Any]:
    """Yield the values of the tree in inorder: left subtree, node, right subtree."""
    pending: list[Node] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.data
        node = node.right


def _example_tree() -> Node:
    return Node(1, Node(2, Node(4), Node(5)), Node(3))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the inorder traversal of the example tree."""
    parser = argparse.ArgumentParser(description="Print an inorder traversal of a sample tree.")
    parser.parse_args(argv)
    print("Inorder Traversal: " + " ".join(str(value) for value in inorder(_example_tree())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())