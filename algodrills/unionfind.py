"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the integers ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._size = [1] * size
        self._count = size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} out of range for {len(self._parent)} elements")

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def same_set(self, first: int, second: int) -> bool:
        """Tell whether both items belong to the same set."""
        return self.find(first) == self.find(second)

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of both items; return False if they were already one."""
        x, y = self.find(first), self.find(second)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._count -= 1
        return True

    def set_size(self, item: int) -> int:
        """Number of elements in the set holding ``item``."""
        return self._size[self.find(item)]

    def set_count(self) -> int:
        """Number of disjoint sets."""
        return self._count


def parity_components(size: int) -> list[int]:
    """Join every element with its parity class and return each element's representative."""
    sets = UnionFind(size)
    for item in range(size):
        sets.union(item, item % 2)
    return [sets.find(item) for item in range(size)]