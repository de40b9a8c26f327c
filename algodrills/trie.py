"""Prefix tree of words."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Vertex:
    exists: bool = False
    children: dict[str, _Vertex] = field(default_factory=dict)


class Trie:
    """A set of words supporting exact and prefix lookup."""

    def __init__(self) -> None:
        self._root = _Vertex()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Vertex())
        node.exists = True

    def _walk(self, text: str) -> _Vertex | None:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.exists

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)