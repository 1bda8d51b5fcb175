"""Weighted union-find (disjoint set) with path halving."""

from __future__ import annotations

import numpy as np


class UnionFind:
    """Disjoint-set forest over the elements ``0 .. size - 1``.

    Trees are merged by size and paths are halved during ``find``, so a
    sequence of operations runs in near-linear time.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"UnionFind needs at least one element, got {size}")
        self.parent = np.arange(size)
        self.size = np.ones(size, dtype=int)
        self._count = size

    def __len__(self) -> int:
        return int(self.parent.shape[0])

    @property
    def count(self) -> int:
        """Number of disjoint sets."""

        return self._count

    def _validate(self, p: int) -> None:
        n = len(self)
        if not 0 <= p < n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, x: int) -> int:
        self._validate(x)
        while self.parent[x] != x:
            self.parent[x] = self.parent[self.parent[x]]
            x = int(self.parent[x])
        return int(x)

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        self._count -= 1
        return True


__all__ = ["UnionFind"]
