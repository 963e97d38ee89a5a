"""Site percolation on an n-by-n square grid.

Sites are addressed by 1-indexed ``(row, col)`` pairs and stored at the
linear index ``(row - 1) * n + col``. Two virtual sites are always open:
index ``0`` sits above the grid and is joined to every site of the first
row, index ``n * n + 1`` sits below and is joined to every site of the last
row. For ``n = 3``::

    [   ,  0 ,   ]   top
    [ 1 ,  2 , 3 ]
    [ 4 ,  5 , 6 ]
    [ 7 ,  8 , 9 ]
    [   , 10 ,   ]   bottom

Percolation then reduces to a single connectivity query between the two
virtual sites.
"""

from __future__ import annotations

import numpy as np

from .union_find import UnionFind

TOP = 0


def check_integer(name: str, value: object) -> int:
    """Return ``value`` as an int, rejecting bools and non-integral numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


class Percolation:
    def __init__(self, n: int) -> None:
        n = check_integer("n", n)
        if n <= 0:
            raise ValueError("n must be greater than 0")
        self._n = n
        self.bottom = n * n + 1
        size = n * n + 2
        self._uf = UnionFind(size)
        self._grid = np.zeros(size, dtype=bool)
        self._grid[TOP] = True
        self._grid[self.bottom] = True
        self._open = 0

        # Row 1 and row n are the same row when n == 1; both unions still apply.
        for i in range(1, n + 1):
            self._uf.union(i, TOP)
        for i in range(n * (n - 1) + 1, n * n + 1):
            self._uf.union(i, self.bottom)

    @property
    def n(self) -> int:
        return self._n

    def _validate(self, row: int, col: int) -> None:
        n = self._n
        row = check_integer("row", row)
        col = check_integer("col", col)
        if row < 1 or row > n:
            raise ValueError(f"row {row} is not between 1 and {n}")
        if col < 1 or col > n:
            raise ValueError(f"col {col} is not between 1 and {n}")

    def index(self, row: int, col: int) -> int:
        """Linear index of ``(row, col)`` in the union-find."""
        self._validate(row, col)
        return (row - 1) * self._n + col

    def _neighbours(self, row: int, col: int) -> list[int]:
        n = self._n
        site = (row - 1) * n + col
        out: list[int] = []
        if row > 1:
            out.append(site - n)
        if row < n:
            out.append(site + n)
        if col > 1:
            out.append(site - 1)
        if col < n:
            out.append(site + 1)
        return out

    def open(self, row: int, col: int) -> None:
        """Open ``(row, col)`` and join it to its open neighbours.

        Opening a site that is already open changes nothing.
        """
        site = self.index(row, col)
        grid = self._grid
        if grid[site]:
            return
        grid[site] = True
        self._open += 1
        for other in self._neighbours(row, col):
            if grid[other]:
                self._uf.union(site, other)

    def is_open(self, row: int, col: int) -> bool:
        return bool(self._grid[self.index(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """Whether water poured on the top row reaches ``(row, col)``."""
        site = self.index(row, col)
        return bool(self._grid[site]) and self._uf.connected(site, TOP)

    def number_of_open_sites(self) -> int:
        return self._open

    def percolates(self) -> bool:
        # With n == 1 both virtual sites are joined through the blocked site.
        if self._n == 1:
            return self._open == 1
        return self._uf.connected(TOP, self.bottom)

    def __repr__(self) -> str:
        return f"Percolation(n={self._n}, open={self._open})"


__all__ = ["Percolation", "TOP", "check_integer"]
