"""Binary search tree of integers with depth-first traversals."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


def _inorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert a value, placing duplicates in the right subtree."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def inorder(self) -> Iterator[int]:
        """Yield values left subtree, root, right subtree."""
        return _inorder(self._root)

    def preorder(self) -> Iterator[int]:
        """Yield values root, left subtree, right subtree."""
        return _preorder(self._root)

    def postorder(self) -> Iterator[int]:
        """Yield values left subtree, right subtree, root."""
        return _postorder(self._root)


def _line(label: str, values: Iterable[int]) -> str:
    return label + "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Build the sample tree and print its three traversals."""
    argparse.ArgumentParser(
        description="Show tree traversals of a sample binary search tree."
    ).parse_args(argv)
    tree = BinarySearchTree([8, 3, 10, 1, 6])
    print(_line("Recorrido Inorden: ", tree.inorder()))
    print(_line("Recorrido Preorden: ", tree.preorder()))
    print(_line("Recorrido Postorden: ", tree.postorder()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())