"""Weighted quick-union with path compression over numpy arrays."""

from __future__ import annotations

import numpy as np


class UnionFind:
    """Disjoint-set over the elements ``0 .. size - 1``.

    Union by size keeps trees shallow and ``find`` re-links every element it
    passes to the root, so every operation is amortized near-constant time.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.parent = np.arange(size, dtype=np.int64)
        self._size = np.ones(size, dtype=np.int64)
        self._count = int(size)

    def __len__(self) -> int:
        return int(self.parent.shape[0])

    @property
    def count(self) -> int:
        """Number of components."""
        return self._count

    def _validate(self, x: int) -> None:
        n = self.parent.shape[0]
        if x < 0 or x >= n:
            raise IndexError(f"index {x} is not between 0 and {n - 1}")

    def find(self, x: int) -> int:
        self._validate(x)
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        # Point every element on the walked path straight at the root.
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return int(root)

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        """Merge the components of ``a`` and ``b``; False if already merged."""
        small, large = self.find(a), self.find(b)
        if small == large:
            return False
        weights = self._size
        if weights[small] > weights[large]:
            small, large = large, small
        self.parent[small] = large
        weights[large] += weights[small]
        self._count -= 1
        return True

    def component_size(self, x: int) -> int:
        root = self.find(x)
        return int(self._size[root])


__all__ = ["UnionFind"]
