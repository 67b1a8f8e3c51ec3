import pytest

from site_perc.constants import BOTTOM_ID, OUT_OF_GRID, TOP_ID, VIRTUAL_COORD
from site_perc.grid import Grid


class TestGridBuild:
    def test_size_includes_virtual_nodes(self) -> None:
        grid = Grid.build(4, 3)
        assert len(grid) == 4 * 3 + 2
        assert grid.cell_count == 12

    def test_virtual_nodes(self) -> None:
        grid = Grid.build(3, 3)
        top, bottom = grid[TOP_ID], grid[BOTTOM_ID]
        assert top.open and bottom.open
        assert top.coord == VIRTUAL_COORD and bottom.coord == VIRTUAL_COORD
        assert top.set_id == TOP_ID
        assert bottom.set_id == BOTTOM_ID

    def test_real_sites_start_closed_in_row_major_order(self) -> None:
        grid = Grid.build(3, 2)
        coords = [site.coord for site in grid.real_sites()]
        assert coords == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
        assert not any(site.open for site in grid.real_sites())

    def test_boundary_rows_are_prewired(self) -> None:
        grid = Grid.build(3, 3)
        assert [grid[k].set_id for k in (2, 3, 4)] == [TOP_ID] * 3
        assert [grid[k].set_id for k in (5, 6, 7)] == [5, 6, 7]
        assert [grid[k].set_id for k in (8, 9, 10)] == [BOTTOM_ID] * 3

    def test_single_row_is_wired_to_both_virtuals(self) -> None:
        grid = Grid.build(3, 1)
        assert [grid[k].set_id for k in grid.real_ids()] == [BOTTOM_ID] * 3
        assert grid[BOTTOM_ID].set_id == TOP_ID
        assert grid[TOP_ID].set_id == TOP_ID

    @pytest.mark.parametrize("cols, rows", [(0, 3), (3, 0), (-1, 2), (2, -5)])
    def test_rejects_non_positive_sizes(self, cols: int, rows: int) -> None:
        with pytest.raises(ValueError):
            Grid.build(cols, rows)


class TestGridIndex:
    def test_interior_ids(self) -> None:
        grid = Grid.build(3, 3)
        assert grid.index(0, 0) == 2
        assert grid.index(1, 1) == 6
        assert grid.index(2, 2) == 10
        for j in range(3):
            for i in range(3):
                assert grid[grid.index(i, j)].coord == (i, j)

    @pytest.mark.parametrize("i, j", [(-1, 0), (0, -1), (3, 0), (0, 4), (3, 4), (-1, -1)])
    def test_off_grid_returns_sentinel(self, i: int, j: int) -> None:
        grid = Grid.build(3, 4)
        assert grid.index(i, j) == OUT_OF_GRID

    def test_neighbors_of_center(self) -> None:
        grid = Grid.build(3, 3)
        # north, east, south, west
        assert grid.neighbors(6) == [3, 7, 9, 5]

    def test_neighbors_skip_off_grid(self) -> None:
        grid = Grid.build(3, 3)
        assert grid.neighbors(2) == [3, 5]
        assert grid.neighbors(10) == [7, 9]

    def test_virtual_nodes_have_no_neighbors(self) -> None:
        grid = Grid.build(2, 2)
        assert grid.neighbors(TOP_ID) == []
        assert grid.neighbors(BOTTOM_ID) == []
