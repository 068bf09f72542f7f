"""
Weighted quick-union with path halving.

Disjoint-set structure over a fixed universe of integer elements ``0..n-1``.
Parent links and tree sizes are stored in numpy integer arrays so a grid of
N*N sites costs two flat arrays rather than N*N Python objects.
"""

import numpy as np

from .exceptions import InvalidArgumentError, SiteIndexError


class WeightedQuickUnionUF:
    """
    Union-find over ``n`` elements with union-by-size and path halving.

    Example:
        uf = WeightedQuickUnionUF(10)
        uf.union(3, 4)
        uf.connected(3, 4)  # True
    """

    def __init__(self, n: int):
        """
        Initialize ``n`` singleton sets.

        Args:
            n: Number of elements (must be >= 0)
        """
        if n < 0:
            raise InvalidArgumentError(f"Number of elements must be >= 0, got {n}")

        self.n = int(n)
        self.parent = np.arange(self.n, dtype=np.int64)
        self.size = np.ones(self.n, dtype=np.int64)
        self.count = self.n

    def __len__(self) -> int:
        return self.n

    def _validate(self, p: int) -> None:
        if p < 0 or p >= self.n:
            raise SiteIndexError(f"Element {p} is not between 0 and {self.n - 1}")

    def find(self, p: int) -> int:
        """
        Return the root of the set containing ``p``.

        Every other node on the path is pointed at its grandparent.
        """
        self._validate(p)
        parent = self.parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return int(p)

    def connected(self, p: int, q: int) -> bool:
        """Return True if ``p`` and ``q`` are in the same set."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the sets containing ``p`` and ``q``."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        # Smaller tree goes under the larger one
        if self.size[root_p] < self.size[root_q]:
            root_p, root_q = root_q, root_p
        self.parent[root_q] = root_p
        self.size[root_p] += self.size[root_q]
        self.count -= 1
