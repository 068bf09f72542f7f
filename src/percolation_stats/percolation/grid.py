"""
N-by-N site percolation grid.

Sites are addressed with 1-based (row, col) coordinates and stored at linear
index ``(row - 1) * N + col``. Index 0 is a virtual top site joined to every
site in row 1, and index ``N*N + 1`` is a virtual bottom site joined to every
site in row N, so "does the grid percolate?" and "is this site full?" each
reduce to a single connectivity query.

Two independent union-find structures are kept:

- ``_percolation_uf`` knows about both virtual sites and answers percolates().
- ``_fullness_uf`` only knows about the virtual top and answers is_full().

With a single structure, a bottom-row site would look full as soon as the grid
percolates anywhere, because it shares a root with the virtual bottom, which
is connected to the top (backwash).
"""

import numpy as np

from ..exceptions import InvalidArgumentError, SiteIndexError
from ..union_find import WeightedQuickUnionUF


class PercolationGrid:
    """
    Site percolation on an N-by-N grid with all sites initially blocked.

    Example:
        grid = PercolationGrid(3)
        grid.open(1, 2)
        grid.open(2, 2)
        grid.open(3, 2)
        grid.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Create an N-by-N grid.

        Args:
            n: Grid dimension (rows = columns = n), must be positive
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
            raise InvalidArgumentError(f"Grid size must be a positive integer, got {n!r}")

        self.n = int(n)
        self.top = 0
        self.bottom = self.n * self.n + 1

        n_slots = self.n * self.n + 2
        self._open = np.zeros(n_slots, dtype=bool)
        self._percolation_uf = WeightedQuickUnionUF(n_slots)
        self._fullness_uf = WeightedQuickUnionUF(n_slots)

        for col in range(1, self.n + 1):
            top_site = self._to_index(1, col)
            self._percolation_uf.union(self.top, top_site)
            self._fullness_uf.union(self.top, top_site)
            # Only the percolation structure sees the bottom row
            self._percolation_uf.union(self._to_index(self.n, col), self.bottom)

    def _to_index(self, row: int, col: int) -> int:
        return (row - 1) * self.n + col

    def _validate(self, row: int, col: int) -> None:
        if row < 1 or row > self.n:
            raise SiteIndexError(f"Row index {row} out of bounds [1, {self.n}]")
        if col < 1 or col > self.n:
            raise SiteIndexError(f"Column index {col} out of bounds [1, {self.n}]")

    def index(self, row: int, col: int) -> int:
        """Linear index of site (row, col) in ``[1, N*N]``."""
        self._validate(row, col)
        return self._to_index(row, col)

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        The site is joined to each open neighbour (up, down, left, right)
        in both union-find structures.
        """
        self._validate(row, col)
        site = self._to_index(row, col)
        if self._open[site]:
            return

        self._open[site] = True

        neighbours = []
        if row > 1:
            neighbours.append(site - self.n)
        if row < self.n:
            neighbours.append(site + self.n)
        if col > 1:
            neighbours.append(site - 1)
        if col < self.n:
            neighbours.append(site + 1)

        for other in neighbours:
            if self._open[other]:
                self._percolation_uf.union(site, other)
                self._fullness_uf.union(site, other)

    def is_open(self, row: int, col: int) -> bool:
        """Is site (row, col) open?"""
        self._validate(row, col)
        return bool(self._open[self._to_index(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """Is site (row, col) open and connected to the top row through open sites?"""
        self._validate(row, col)
        site = self._to_index(row, col)
        return bool(self._open[site]) and self._fullness_uf.connected(self.top, site)

    def number_of_open_sites(self) -> int:
        """Number of open sites in the grid."""
        return int(np.count_nonzero(self._open))

    def percolates(self) -> bool:
        """Does the grid have an open path from the top row to the bottom row?"""
        # For N == 1 the single site is joined to both virtual sites at construction
        if self.n == 1 and not self._open[1]:
            return False
        return self._percolation_uf.connected(self.top, self.bottom)
