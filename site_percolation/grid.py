"""Site percolation model on an n x n grid."""

from __future__ import annotations

import numbers

import numpy as np

from .constants import NEIGHBOR_OFFSETS, VIRTUAL_TOP
from .union_find import UnionFind


class Percolation:
    """Grid of open/closed sites backed by a union-find.

    Two virtual sites anchor the query: every open site in the first row is
    joined to the virtual top, every open site in the last row to the
    virtual bottom. The grid percolates when the two are connected.
    """

    def __init__(self, n: int) -> None:
        if not isinstance(n, numbers.Integral) or isinstance(n, bool):
            raise TypeError(f"grid size must be an integer, got {n!r}")
        if n < 1:
            raise ValueError(f"grid size must be at least 1, got {n}")
        self._n = int(n)
        self._grid = np.zeros((self._n, self._n), dtype=bool)
        self._uf = UnionFind(self._n * self._n + 2)
        self._virtual_top = VIRTUAL_TOP
        self._virtual_bottom = self._n * self._n + 1
        self._open_count = 0

    def __repr__(self) -> str:
        return (
            f"Percolation(n={self._n}, open={self._open_count}, "
            f"percolates={self.percolation_check()})"
        )

    @property
    def n(self) -> int:
        return self._n

    @property
    def number_of_open_sites(self) -> int:
        return self._open_count

    @property
    def open_fraction(self) -> float:
        return self._open_count / (self._n * self._n)

    def open_site(self, row: int, col: int) -> None:
        """Open the site at (row, col). Opening an open site does nothing."""

        self._check_bounds(row, col)
        if self._grid[row, col]:
            return
        self._grid[row, col] = True
        self._open_count += 1

        site = self._index(row, col)
        if row == 0:
            self._uf.union(site, self._virtual_top)
        if row == self._n - 1:
            self._uf.union(site, self._virtual_bottom)
        self._connect_to_adjacent(row, col)

    def open_all_sites(self) -> None:
        """Open every site, row by row."""

        for row in range(self._n):
            for col in range(self._n):
                self.open_site(row, col)

    def percolation_check(self) -> bool:
        """Return True if an open path joins the top row to the bottom row."""

        return self._uf.connected(self._virtual_top, self._virtual_bottom)

    percolates = percolation_check

    def is_open(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return bool(self._grid[row, col])

    def is_full(self, row: int, col: int) -> bool:
        """Return True if the site is open and connected to the top row."""

        self._check_bounds(row, col)
        if not self._grid[row, col]:
            return False
        return self._uf.connected(self._index(row, col), self._virtual_top)

    def is_valid(self, row: int, col: int) -> bool:
        return 0 <= row < self._n and 0 <= col < self._n

    def open_mask(self) -> np.ndarray:
        """Return a copy of the open/closed state as a boolean array."""

        return self._grid.copy()

    def _check_bounds(self, row: int, col: int) -> None:
        for value in (row, col):
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise TypeError(f"coordinates must be integers, got ({row!r}, {col!r})")
        if not self.is_valid(row, col):
            raise IndexError(
                f"site ({row}, {col}) is outside the {self._n}x{self._n} grid"
            )

    def _index(self, row: int, col: int) -> int:
        return row * self._n + col + 1

    def _connect_to_adjacent(self, row: int, col: int) -> None:
        # (row, col) is already validated; neighbours only need is_valid
        site = self._index(row, col)
        for d_row, d_col in NEIGHBOR_OFFSETS:
            n_row, n_col = row + d_row, col + d_col
            if not self.is_valid(n_row, n_col) or not self._grid[n_row, n_col]:
                continue
            neighbor = self._index(n_row, n_col)
            if not self._uf.connected(site, neighbor):
                self._uf.union(site, neighbor)


__all__ = ["Percolation"]
