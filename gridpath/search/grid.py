"""Dense grid of cells with 4-connected adjacency and obstacle edits."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from gridpath.search.cell import Cell
from gridpath.search.contracts import CellTag, Coord
from gridpath.search.errors import InvalidDimensions, OutOfBounds

logger = logging.getLogger(__name__)

# Up, down, left, right.
_OFFSETS: tuple[Coord, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Grid:
    """Owns every Cell of a ``width`` x ``height`` board in row-major order.

    Cells are created once and reused by every search; call
    :meth:`reset_scores` before reusing score fields.
    """

    def __init__(self, width: int, height: int) -> None:
        if not _is_positive_int(width) or not _is_positive_int(height):
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        self.cells: list[Cell] = [
            Cell(x=index % width, y=index // width, index=index)
            for index in range(width * height)
        ]

    @classmethod
    def build(
        cls, width: int, height: int, obstacles: Iterable[Coord] = ()
    ) -> Grid:
        """Create a grid, mark ``obstacles``, then link free neighbours."""
        grid = cls(width, height)
        for x, y in obstacles:
            cell = grid.cell(x, y)
            cell.is_obstacle = True
            cell.tag = CellTag.OBSTACLE
        grid._link_neighbors()
        return grid

    def _link_neighbors(self) -> None:
        for cell in self.cells:
            for dx, dy in _OFFSETS:
                nx, ny = cell.x + dx, cell.y + dy
                if self.in_bounds(nx, ny):
                    cell.add_neighbor(self.cells[self._index(nx, ny)])

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self._index(x, y)

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[self.index_of(x, y)]

    def neighbors_of(self, x: int, y: int) -> list[Coord]:
        cell = self.cell(x, y)
        return sorted(self.cells[index].coord for index in cell.neighbors)

    def obstacles(self) -> list[Coord]:
        return [cell.coord for cell in self.cells if cell.is_obstacle]

    def set_obstacle(self, x: int, y: int) -> None:
        """Turn a cell into an obstacle and prune every edge touching it.

        Obstacles are permanent: there is no way to restore the pruned edges.
        """
        cell = self.cell(x, y)
        if cell.is_obstacle:
            return
        cell.is_obstacle = True
        cell.tag = CellTag.OBSTACLE
        for index in cell.neighbors:
            self.cells[index].neighbors.discard(cell.index)
        cell.neighbors.clear()
        logger.debug("Marked obstacle at (%d, %d)", x, y)

    def get_cell_value(self, x: int, y: int) -> CellTag:
        return self.cell(x, y).tag

    def set_cell_value(self, x: int, y: int, tag: CellTag | str) -> None:
        # Display only; never touches is_obstacle or adjacency.
        self.cell(x, y).tag = CellTag(tag)

    def reset_scores(self) -> None:
        for cell in self.cells:
            cell.reset_scores()


def lattice_obstacles(width: int, height: int, spacing: int = 4) -> list[Coord]:
    """Obstacles at every ``spacing``-th column and row, skipping row/column 0."""
    if spacing <= 0:
        return []
    return [
        (x, y)
        for x in range(spacing, width, spacing)
        for y in range(spacing, height, spacing)
    ]


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
