"""Grid graph, indexed priority queue and A* search."""

from gridpath.search.astar import (
    AStarSearch,
    SearchState,
    edge_cost,
    extract_path,
    find_path,
    heuristic,
)
from gridpath.search.cell import Cell
from gridpath.search.contracts import CellTag, Coord, PathResult, SearchStatus
from gridpath.search.errors import (
    DuplicateKey,
    Empty,
    GridPathError,
    InvalidDimensions,
    MapFormatError,
    NotFound,
    ObstacleEndpoint,
    OutOfBounds,
)
from gridpath.search.grid import Grid, lattice_obstacles
from gridpath.search.grid_loader import GridMap, load_grid_map, parse_ascii_map
from gridpath.search.priority_queue import IndexedPriorityQueue

__all__ = [
    "AStarSearch",
    "Cell",
    "CellTag",
    "Coord",
    "DuplicateKey",
    "Empty",
    "Grid",
    "GridMap",
    "GridPathError",
    "IndexedPriorityQueue",
    "InvalidDimensions",
    "MapFormatError",
    "NotFound",
    "ObstacleEndpoint",
    "OutOfBounds",
    "PathResult",
    "SearchState",
    "SearchStatus",
    "edge_cost",
    "extract_path",
    "find_path",
    "heuristic",
    "lattice_obstacles",
    "load_grid_map",
    "parse_ascii_map",
]
