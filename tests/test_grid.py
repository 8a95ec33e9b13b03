import math

import pytest

from gridpath.search.contracts import CellTag
from gridpath.search.errors import InvalidDimensions, OutOfBounds
from gridpath.search.grid import Grid, lattice_obstacles


def test_build_lays_cells_out_row_major() -> None:
    grid = Grid.build(4, 3)

    assert len(grid) == 12
    for index, cell in enumerate(grid):
        assert cell.index == index
        assert cell.x == index % 4
        assert cell.y == index // 4
    assert grid.cell(3, 2).index == 11


def test_build_links_four_neighbours() -> None:
    grid = Grid.build(3, 3)

    assert grid.neighbors_of(0, 0) == [(0, 1), (1, 0)]
    assert grid.neighbors_of(1, 1) == [(0, 1), (1, 0), (1, 2), (2, 1)]
    assert grid.neighbors_of(2, 1) == [(1, 1), (2, 0), (2, 2)]


def test_adjacency_is_symmetric_after_build() -> None:
    grid = Grid.build(7, 5, obstacles=[(1, 1), (3, 2), (6, 4), (0, 4)])

    for cell in grid:
        if cell.is_obstacle:
            assert cell.neighbors == set()
            continue
        for index in cell.neighbors:
            other = grid.cells[index]
            assert not other.is_obstacle
            assert cell.index in other.neighbors


def test_build_rejects_invalid_dimensions() -> None:
    for width, height in [(0, 5), (5, 0), (-1, 3), (2.5, 2), (True, 3)]:
        with pytest.raises(InvalidDimensions):
            Grid.build(width, height)

    with pytest.raises(ValueError):
        Grid(0, 0)


def test_build_rejects_out_of_bounds_obstacles() -> None:
    with pytest.raises(OutOfBounds):
        Grid.build(3, 3, obstacles=[(3, 0)])


def test_set_obstacle_prunes_every_edge() -> None:
    grid = Grid.build(5, 5)
    target = grid.cell(2, 2)

    grid.set_obstacle(2, 2)

    assert target.is_obstacle
    assert target.neighbors == set()
    assert grid.get_cell_value(2, 2) == CellTag.OBSTACLE
    for cell in grid:
        assert target.index not in cell.neighbors
    assert grid.neighbors_of(2, 1) == [(1, 1), (2, 0), (3, 1)]


def test_set_obstacle_is_idempotent() -> None:
    once = Grid.build(4, 4)
    twice = Grid.build(4, 4)

    once.set_obstacle(1, 2)
    twice.set_obstacle(1, 2)
    twice.set_obstacle(1, 2)

    assert [cell.neighbors for cell in once] == [cell.neighbors for cell in twice]
    assert once.obstacles() == twice.obstacles() == [(1, 2)]


def test_set_obstacle_out_of_bounds() -> None:
    grid = Grid.build(5, 5)

    with pytest.raises(OutOfBounds):
        grid.set_obstacle(5, 0)
    with pytest.raises(OutOfBounds):
        grid.set_obstacle(-1, 0)
    with pytest.raises(IndexError):
        grid.set_obstacle(0, 5)


def test_cell_value_is_display_only() -> None:
    grid = Grid.build(3, 3)

    assert grid.get_cell_value(1, 1) == CellTag.FREE
    grid.set_cell_value(1, 1, CellTag.OBSTACLE)
    grid.set_cell_value(0, 0, "goal")

    assert grid.get_cell_value(1, 1) == CellTag.OBSTACLE
    assert grid.get_cell_value(0, 0) == CellTag.GOAL
    assert not grid.cell(1, 1).is_obstacle
    assert len(grid.neighbors_of(1, 1)) == 4

    with pytest.raises(OutOfBounds):
        grid.get_cell_value(3, 3)
    with pytest.raises(OutOfBounds):
        grid.set_cell_value(-1, 0, CellTag.START)


def test_reset_scores_clears_search_state() -> None:
    grid = Grid.build(2, 2)
    cell = grid.cell(1, 1)
    cell.local_score = 2.0
    cell.global_score = 3.0
    cell.parent = 0

    grid.reset_scores()

    assert cell.local_score == math.inf
    assert cell.global_score == math.inf
    assert cell.parent is None


def test_lattice_obstacles_layout() -> None:
    assert lattice_obstacles(9, 9, 4) == [(4, 4), (4, 8), (8, 4), (8, 8)]
    assert lattice_obstacles(4, 4, 4) == []
    assert lattice_obstacles(10, 10, 0) == []

    grid = Grid.build(9, 9, lattice_obstacles(9, 9))
    assert grid.obstacles() == [(4, 4), (8, 4), (4, 8), (8, 8)]
    assert (4, 4) not in grid.neighbors_of(4, 3)
