"""Grid-based pathfinding (A*) with a decrease-key open list."""

from __future__ import annotations

import logging
import math
from enum import Enum

from gridpath.search.cell import Cell
from gridpath.search.contracts import Coord, PathResult, SearchStatus
from gridpath.search.errors import ObstacleEndpoint
from gridpath.search.grid import Grid
from gridpath.search.priority_queue import IndexedPriorityQueue

logger = logging.getLogger(__name__)


class SearchState(str, Enum):
    INITIALIZED = "INITIALIZED"
    RUNNING = "RUNNING"
    FOUND = "FOUND"
    EXHAUSTED = "EXHAUSTED"


def heuristic(a: Cell, b: Cell) -> float:
    """Euclidean distance; admissible and consistent for unit edge costs."""
    return math.hypot(a.x - b.x, a.y - b.y)


def edge_cost(a: Cell, b: Cell) -> float:
    # Distance between adjacent cell centres, 1.0 for 4-connectivity.
    return math.hypot(a.x - b.x, a.y - b.y)


def extract_path(grid: Grid, goal: Coord, start: Coord | None = None) -> list[Coord]:
    """Walk ``parent`` links back from ``goal`` and return start..goal.

    Returns an empty list when the goal was never reached. ``start`` lets a
    goal that is the start itself count as a one-cell path.
    """
    cell = grid.cell(*goal)
    if cell.parent is None and (start is None or tuple(start) != cell.coord):
        return []
    path: list[Coord] = []
    current: Cell | None = cell
    while current is not None:
        path.append(current.coord)
        current = grid.cells[current.parent] if current.parent is not None else None
    path.reverse()
    return path


class AStarSearch:
    """One A* run at a time over a shared :class:`Grid`.

    Cells keep their scores between runs, so :meth:`run` always starts by
    resetting them. Do not edit obstacles while a run is in progress.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._state = SearchState.INITIALIZED
        self._expanded = 0

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def expanded(self) -> int:
        return self._expanded

    def run(self, start: Coord, goal: Coord) -> PathResult:
        grid = self._grid
        start_cell = grid.cell(*start)
        goal_cell = grid.cell(*goal)
        if start_cell.is_obstacle:
            raise ObstacleEndpoint(start_cell.x, start_cell.y, "start")
        if goal_cell.is_obstacle:
            raise ObstacleEndpoint(goal_cell.x, goal_cell.y, "goal")

        self._state = SearchState.RUNNING
        self._expanded = 0
        grid.reset_scores()

        start_cell.local_score = 0.0
        start_cell.global_score = heuristic(start_cell, goal_cell)

        open_list = IndexedPriorityQueue()
        open_list.push(start_cell.index, start_cell.global_score)
        closed: set[int] = set()

        while not open_list.is_empty():
            index, _ = open_list.pop_min()
            current = grid.cells[index]
            closed.add(index)
            self._expanded += 1

            if current.same_position(goal_cell):
                self._state = SearchState.FOUND
                logger.debug(
                    "Found path %s -> %s, cost %.3f, expanded %d",
                    start_cell.coord,
                    goal_cell.coord,
                    current.local_score,
                    self._expanded,
                )
                return PathResult(
                    status=SearchStatus.FOUND,
                    path=extract_path(grid, goal_cell.coord, start_cell.coord),
                    cost=current.local_score,
                    expanded=self._expanded,
                )

            for neighbor_index in current.neighbors:
                if neighbor_index in closed:
                    continue
                neighbor = grid.cells[neighbor_index]
                tentative = current.local_score + edge_cost(current, neighbor)
                if tentative >= neighbor.local_score:
                    continue
                neighbor.parent = current.index
                neighbor.local_score = tentative
                neighbor.global_score = tentative + heuristic(neighbor, goal_cell)
                if neighbor_index in open_list:
                    open_list.decrease_key(neighbor_index, neighbor.global_score)
                else:
                    open_list.push(neighbor_index, neighbor.global_score)

        self._state = SearchState.EXHAUSTED
        logger.debug(
            "No path %s -> %s, expanded %d",
            start_cell.coord,
            goal_cell.coord,
            self._expanded,
        )
        return PathResult.unreachable(expanded=self._expanded)


def find_path(grid: Grid, start: Coord, goal: Coord) -> PathResult:
    return AStarSearch(grid).run(start, goal)
