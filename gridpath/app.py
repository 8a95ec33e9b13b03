"""Application entry for building a grid and running one search."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridpath.config import GridPathConfig
from gridpath.search.astar import AStarSearch
from gridpath.search.contracts import CellTag, Coord, PathResult
from gridpath.search.grid import Grid, lattice_obstacles
from gridpath.search.grid_loader import GridMap, load_grid_map

logger = logging.getLogger(__name__)

DEFAULT_START: Coord = (0, 0)


@dataclass
class SearchRun:
    grid: Grid
    start: Coord
    goal: Coord
    result: PathResult


def build_grid_map(config: GridPathConfig) -> GridMap:
    if config.map_file is not None:
        grid_map = load_grid_map(config.map_file)
        logger.info(
            "Loaded %dx%d grid from %s",
            grid_map.grid.width,
            grid_map.grid.height,
            config.map_file,
        )
    else:
        obstacles = lattice_obstacles(
            config.width, config.height, config.lattice_spacing
        )
        grid_map = GridMap(grid=Grid.build(config.width, config.height, obstacles))
        logger.info(
            "Built %dx%d grid with %d lattice obstacles",
            config.width,
            config.height,
            len(obstacles),
        )
    for x, y in config.obstacles:
        grid_map.grid.set_obstacle(x, y)
    return grid_map


def run_search(config: GridPathConfig) -> SearchRun:
    grid_map = build_grid_map(config)
    grid = grid_map.grid
    start = config.start or grid_map.start or DEFAULT_START
    goal = config.goal or grid_map.goal or (grid.width - 1, grid.height - 1)

    result = AStarSearch(grid).run(start, goal)
    _clear_stale_endpoint(grid, grid_map.start, start, CellTag.START)
    _clear_stale_endpoint(grid, grid_map.goal, goal, CellTag.GOAL)
    _tag_endpoints(grid, start, goal)
    logger.info("Search %s -> %s: %s", start, goal, result.status.value)
    return SearchRun(grid=grid, start=start, goal=goal, result=result)


def _clear_stale_endpoint(
    grid: Grid, previous: Coord | None, current: Coord, tag: CellTag
) -> None:
    # A map's own S/G tile loses its tag when the command line moves it.
    if previous is None or tuple(previous) == tuple(current):
        return
    if grid.get_cell_value(*previous) == tag:
        grid.set_cell_value(*previous, CellTag.FREE)


def _tag_endpoints(grid: Grid, start: Coord, goal: Coord) -> None:
    for coord, tag in ((start, CellTag.START), (goal, CellTag.GOAL)):
        if grid.get_cell_value(*coord) == CellTag.FREE:
            grid.set_cell_value(*coord, tag)
