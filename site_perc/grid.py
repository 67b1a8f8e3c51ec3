"""Site storage and coordinate to index mapping."""

from __future__ import annotations

from typing import Iterator, List

from .constants import (
    BOTTOM_ID,
    NEIGHBOR_OFFSETS,
    OUT_OF_GRID,
    TOP_ID,
    VIRTUAL_COORD,
    VIRTUAL_COUNT,
)
from .models import Site


class Grid:
    """Arena of sites indexed by integer id.

    Ids 0 and 1 are the TOP and BOTTOM virtual nodes, real cells follow in
    row-major order starting at id 2.
    """

    def __init__(self, cols: int, rows: int, sites: List[Site]) -> None:
        self.cols = cols
        self.rows = rows
        self.sites = sites

    @classmethod
    def build(cls, cols: int, rows: int) -> "Grid":
        if cols <= 0 or rows <= 0:
            raise ValueError(f"grid needs at least one column and one row, got {cols}x{rows}")

        sites: List[Site] = [
            Site(coord=VIRTUAL_COORD, open=True, set_id=TOP_ID),
            Site(coord=VIRTUAL_COORD, open=True, set_id=BOTTOM_ID),
        ]
        for j in range(rows):
            for i in range(cols):
                sites.append(Site(coord=(i, j), open=False, set_id=len(sites)))

        grid = cls(cols, rows, sites)

        # Pre-wire the boundary rows once every real site exists
        for site in grid.real_sites():
            if site.coord[1] == 0:
                site.set_id = TOP_ID
        for site in grid.real_sites():
            if site.coord[1] == rows - 1:
                site.set_id = BOTTOM_ID
        if rows == 1:
            # the only row touches both virtuals
            sites[BOTTOM_ID].set_id = TOP_ID
        return grid

    def __len__(self) -> int:
        return len(self.sites)

    def __getitem__(self, site_id: int) -> Site:
        return self.sites[site_id]

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows

    def index(self, i: int, j: int) -> int:
        if i < 0 or j < 0 or i >= self.cols or j >= self.rows:
            return OUT_OF_GRID
        return i + j * self.cols + VIRTUAL_COUNT

    def real_ids(self) -> range:
        return range(VIRTUAL_COUNT, len(self.sites))

    def real_sites(self) -> Iterator[Site]:
        for site_id in self.real_ids():
            yield self.sites[site_id]

    def neighbors(self, site_id: int) -> List[int]:
        """Return the in-grid north, east, south and west ids of a real site."""

        i, j = self.sites[site_id].coord
        if (i, j) == VIRTUAL_COORD:
            return []
        result: List[int] = []
        for di, dj in NEIGHBOR_OFFSETS:
            k = self.index(i + di, j + dj)
            if k != OUT_OF_GRID:
                result.append(k)
        return result


__all__ = ["Grid"]
