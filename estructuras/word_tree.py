"""Binary search tree of words with usage counts, used for autocompletion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    word: str
    frequency: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _walk(node: _Node | None) -> Iterator[_Node]:
    if node is not None:
        yield from _walk(node.left)
        yield node
        yield from _walk(node.right)


def _minimum(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: _Node | None, word: str) -> _Node | None:
    if node is None:
        return None
    if word < node.word:
        node.left = _remove(node.left, word)
    elif word > node.word:
        node.right = _remove(node.right, word)
    else:
        if node.frequency > 1:
            node.frequency -= 1
            return node
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _minimum(node.right)
        node.word = successor.word
        node.frequency = successor.frequency
        node.right = _remove(node.right, successor.word)
    return node


def _render(node: _Node | None, space: int, level: int, out: list[str]) -> None:
    if node is None:
        return
    child_space = space + level
    _render(node.right, child_space, 5, out)
    out.append("\n" + " " * space + f"{node.word}({node.frequency})")
    _render(node.left, child_space, 5, out)


class WordTree:
    """Words ordered alphabetically, each with the number of times it was added."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, word: str) -> None:
        """Add a word, or count one more use of it if already present."""
        if self._root is None:
            self._root = _Node(word)
            return
        node = self._root
        while True:
            if word == node.word:
                node.frequency += 1
                return
            if word < node.word:
                if node.left is None:
                    node.left = _Node(word)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(word)
                    return
                node = node.right

    def remove(self, word: str) -> None:
        """Count one use fewer of a word, dropping it when none remain.

        Removing a word that is not present does nothing.
        """
        self._root = _remove(self._root, word)

    def suggestions(self, prefix: str) -> list[tuple[str, int]]:
        """Words starting with prefix as (word, frequency), most used first."""
        found = [
            (node.word, node.frequency)
            for node in _walk(self._root)
            if node.word.startswith(prefix)
        ]
        return sorted(found, key=lambda item: item[1], reverse=True)

    def describe_suggestions(self, prefix: str) -> str:
        """Human-readable report of the suggestions for prefix."""
        found = self.suggestions(prefix)
        if not found:
            return f'No hay sugerencias para el prefijo "{prefix}"\n'
        lines = [f'Sugerencias para "{prefix}":\n']
        lines.extend(f"- {word} (usada {count} veces)\n" for word, count in found)
        return "".join(lines)

    def render(self, space: int = 0, level: int = 5) -> str:
        """Sideways drawing of the tree: right subtree above, left below."""
        out: list[str] = []
        _render(self._root, space, level, out)
        return "".join(out)