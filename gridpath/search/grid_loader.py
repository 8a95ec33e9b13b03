"""Load grids from ASCII maps or JSON grid files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from gridpath.search.contracts import CellTag, Coord
from gridpath.search.errors import MapFormatError
from gridpath.search.grid import Grid

OBSTACLE_TILE = "#"
FREE_TILES: set[str] = {".", " "}
START_TILE = "S"
GOAL_TILE = "G"


@dataclass
class GridMap:
    grid: Grid
    start: Coord | None = None
    goal: Coord | None = None
    source: Path | None = field(default=None, compare=False)


def parse_ascii_map(lines: list[str]) -> GridMap:
    rows = [line.rstrip("\n") for line in lines]
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise MapFormatError("Map has no rows.")
    width = len(rows[0])
    obstacles: list[Coord] = []
    start: Coord | None = None
    goal: Coord | None = None
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MapFormatError(
                f"Row {y} has width {len(row)}, expected {width}."
            )
        for x, tile in enumerate(row):
            if tile == OBSTACLE_TILE:
                obstacles.append((x, y))
            elif tile == START_TILE:
                start = _single(start, (x, y), "start")
            elif tile == GOAL_TILE:
                goal = _single(goal, (x, y), "goal")
            elif tile not in FREE_TILES:
                raise MapFormatError(f"Unknown tile {tile!r} at ({x}, {y}).")

    grid = Grid.build(width, len(rows), obstacles)
    _tag_endpoints(grid, start, goal)
    return GridMap(grid=grid, start=start, goal=goal)


def load_grid_map(path: Path) -> GridMap:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing grid map file: {path}") from exc

    if path.suffix == ".json":
        grid_map = _parse_json_map(text)
    else:
        grid_map = parse_ascii_map(text.splitlines())
    grid_map.source = path
    return grid_map


def _parse_json_map(text: str) -> GridMap:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MapFormatError(f"Invalid JSON grid map: {exc}") from exc
    if not isinstance(data, dict):
        raise MapFormatError("JSON grid map must be an object.")
    try:
        width = data["width"]
        height = data["height"]
    except KeyError as exc:
        raise MapFormatError(f"JSON grid map is missing {exc.args[0]!r}.") from exc

    raw_obstacles = data.get("obstacles", [])
    if not isinstance(raw_obstacles, list):
        raise MapFormatError("JSON grid map 'obstacles' must be a list.")
    obstacles = [_coord(item, "obstacle") for item in raw_obstacles]
    start = _coord(data["start"], "start") if data.get("start") is not None else None
    goal = _coord(data["goal"], "goal") if data.get("goal") is not None else None

    grid = Grid.build(width, height, obstacles)
    _tag_endpoints(grid, start, goal)
    return GridMap(grid=grid, start=start, goal=goal)


def _coord(value: object, label: str) -> Coord:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(
            isinstance(part, int) and not isinstance(part, bool) for part in value
        )
    ):
        raise MapFormatError(f"Invalid {label} coordinate: {value!r}.")
    return (value[0], value[1])


def _single(current: Coord | None, found: Coord, label: str) -> Coord:
    if current is not None:
        raise MapFormatError(f"Map has more than one {label} tile.")
    return found


def _tag_endpoints(grid: Grid, start: Coord | None, goal: Coord | None) -> None:
    if start is not None:
        grid.set_cell_value(*start, CellTag.START)
    if goal is not None:
        grid.set_cell_value(*goal, CellTag.GOAL)
