"""Disjoint sets with union by size and path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the elements 1..n."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._parent = list(range(n + 1))
        self._size = [0] + [1] * n

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.n:
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the root of the set holding *x*, compressing the path."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union_sets(self, s1: int, s2: int) -> None:
        """Merge the sets holding *s1* and *s2*; the larger one absorbs the other."""
        r1 = self.find(s1)
        r2 = self.find(s2)
        if r1 == r2:
            return
        if self._size[r1] >= self._size[r2]:
            self._size[r1] += self._size[r2]
            self._parent[r2] = r1
        else:
            self._size[r2] += self._size[r1]
            self._parent[r1] = r2

    def same_component(self, s1: int, s2: int) -> bool:
        """Tell whether *s1* and *s2* are in the same set."""
        return self.find(s1) == self.find(s2)

    def component_size(self, x: int) -> int:
        """Return the number of elements in the set holding *x*."""
        return self._size[self.find(x)]