"""Tests for the occupancy grid."""

import numpy as np
import pytest

from grid_helpers import make_grid
from tilegen.generators.tiles import OccupancyGrid, PixelRect


class TestAccessors:
    def test_new_grid_is_empty(self) -> None:
        grid = OccupancyGrid(4, 3)
        assert grid.occupied_count() == 0
        assert not any(grid.get_tile(x, y) for y in range(3) for x in range(4))

    def test_set_and_get(self) -> None:
        grid = OccupancyGrid(4, 3)
        grid.set_tile(2, 1, True)
        assert grid.get_tile(2, 1) is True
        grid.set_tile(2, 1, False)
        assert grid.get_tile(2, 1) is False

    def test_add_remove(self) -> None:
        grid = OccupancyGrid(2, 2)
        grid.add_tile(1, 0)
        assert grid.get_tile(1, 0)
        grid.remove_tile(1, 0)
        assert not grid.get_tile(1, 0)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3), (100, 100)])
    def test_out_of_bounds_reads_empty(self, x, y) -> None:
        grid = OccupancyGrid(4, 3)
        for yy in range(3):
            for xx in range(4):
                grid.add_tile(xx, yy)
        assert grid.get_tile(x, y) is False

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
    def test_out_of_bounds_writes_ignored(self, x, y) -> None:
        grid = OccupancyGrid(4, 3)
        grid.set_tile(x, y, True)
        assert grid.occupied_count() == 0

    def test_clear(self) -> None:
        grid = OccupancyGrid(3, 3)
        grid.add_tile(0, 0)
        grid.add_tile(2, 2)
        grid.clear()
        assert grid.occupied_count() == 0


class TestBulkView:
    def test_shape_is_height_by_width(self) -> None:
        grid = OccupancyGrid(5, 2)
        assert grid.all_tiles().shape == (2, 5)

    def test_view_reflects_edits(self) -> None:
        grid = OccupancyGrid(3, 2)
        view = grid.all_tiles()
        grid.add_tile(2, 1)
        assert view[1, 2]
        assert np.count_nonzero(view) == 1

    def test_view_is_read_only(self) -> None:
        grid = OccupancyGrid(3, 2)
        view = grid.all_tiles()
        with pytest.raises(ValueError):
            view[0, 0] = True
        # The grid itself stays writable
        grid.add_tile(0, 0)
        assert grid.get_tile(0, 0)

    def test_iter_occupied_is_row_major(self) -> None:
        grid = make_grid([
            ".#.",
            "#.#",
        ])
        assert list(grid.iter_occupied()) == [(1, 0), (0, 1), (2, 1)]


class TestGeometry:
    def test_cell_index(self) -> None:
        grid = OccupancyGrid(4, 4)
        assert grid.cell_index(1, 1) == 5
        assert grid.cell_index(3, 2) == 11

    def test_cell_rect(self) -> None:
        grid = OccupancyGrid(4, 4, cell_size=64)
        assert grid.cell_rect(2, 1) == PixelRect(128, 64, 64, 64)

    def test_cell_rect_out_of_bounds_is_empty(self) -> None:
        grid = OccupancyGrid(4, 4, cell_size=64)
        assert grid.cell_rect(4, 0).is_empty

    def test_pixel_to_cell(self) -> None:
        grid = OccupancyGrid(4, 4, cell_size=64)
        assert grid.pixel_to_cell(130.0, 63.9) == (2, 0)

    def test_from_pixel_size_rounds_up(self) -> None:
        grid = OccupancyGrid.from_pixel_size(1280, 720, 64)
        assert (grid.width, grid.height) == (20, 12)
        grid = OccupancyGrid.from_pixel_size(100, 65, 64)
        assert (grid.width, grid.height) == (2, 2)
