"""Union-find percolation engine over a site grid."""

from __future__ import annotations

import random
from typing import Optional, Tuple

from .constants import BOTTOM_ID, TOP_ID
from .grid import Grid
from .models import SiteView


class ForestInvariantError(RuntimeError):
    """The set_id pointers no longer form a forest, or an id is out of range."""


class PercolationEngine:
    """Open sites one at a time and track top/bottom connectivity.

    Unions always reattach the larger root under the smaller one, and path
    compression happens in a single ``flatten`` pass per step instead of on
    every find.
    """

    def __init__(
        self,
        include_virtual_nodes: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.include_virtual_nodes = include_virtual_nodes
        self.rng = rng if rng is not None else random.Random()
        self._grid: Optional[Grid] = None
        self._opened = 0

    # ------------------------------------------------------------------
    # Setup and external surface
    # ------------------------------------------------------------------
    def setup(self, cols: int, rows: int) -> None:
        self._grid = Grid.build(cols, rows)
        self._opened = 0

    @property
    def grid(self) -> Grid:
        if self._grid is None:
            raise RuntimeError("setup() must be called before using the engine")
        return self._grid

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def opened_count(self) -> int:
        return self._opened

    def step(self) -> int:
        """Open one random site, join it with open neighbours and flatten.

        Returns the drawn id, whether or not it was already open.
        """

        site_id = self.open_random_site()
        self.flatten()
        return site_id

    def percolates(self) -> bool:
        return self.connected(TOP_ID, BOTTOM_ID)

    def snapshot(self) -> Tuple[SiteView, ...]:
        return tuple(
            SiteView(coord=site.coord, open=site.open, set_id=site.set_id)
            for site in self.grid.sites
        )

    def opened_fraction(self) -> float:
        return self._opened / self.grid.cell_count

    def is_complete(self) -> bool:
        return self._opened >= self.grid.cell_count

    def is_full(self, site_id: int) -> bool:
        """True if the site is open and connected to the top virtual node."""

        return self.grid[site_id].open and self.connected(site_id, TOP_ID)

    # ------------------------------------------------------------------
    # Union-find primitives
    # ------------------------------------------------------------------
    def _check_id(self, site_id: int) -> None:
        if not 0 <= site_id < len(self.grid):
            raise ForestInvariantError(
                f"site id {site_id} outside allocated range 0..{len(self.grid) - 1}"
            )

    def root(self, site_id: int) -> int:
        grid = self.grid
        self._check_id(site_id)
        k = site_id
        for _ in range(len(grid)):
            parent = grid[k].set_id
            if parent == k:
                return k
            self._check_id(parent)
            k = parent
        raise ForestInvariantError(f"cycle in set_id pointers reached from site {site_id}")

    def union(self, p: int, q: int) -> None:
        i = self.root(p)
        j = self.root(q)
        if i == j:
            return
        if i < j:
            self.grid[j].set_id = i
        else:
            self.grid[i].set_id = j

    def flatten(self) -> None:
        grid = self.grid
        for k in range(len(grid)):
            grid[k].set_id = self.root(k)

    def connected(self, p: int, q: int) -> bool:
        return self.root(p) == self.root(q)

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------
    def open_random_site(self) -> int:
        grid = self.grid
        if self.include_virtual_nodes:
            site_id = self.rng.randrange(len(grid))
        else:
            site_id = self.rng.choice(grid.real_ids())
        self.open_site(site_id)
        return site_id

    def open_site(self, site_id: int) -> bool:
        """Open ``site_id`` and union it with its open neighbours.

        Returns False without touching any state when the site is already open.
        """

        self._check_id(site_id)
        site = self.grid[site_id]
        if site.open:
            return False

        site.open = True
        self._opened += 1
        for neighbor_id in self.grid.neighbors(site_id):
            if self.grid[neighbor_id].open:
                self.union(site_id, neighbor_id)
        return True


__all__ = ["ForestInvariantError", "PercolationEngine"]
