"""Rich rendering for grids and search results."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridpath.search.contracts import CellTag, Coord, PathResult
from gridpath.search.grid import Grid

TAG_SYMBOLS = {
    CellTag.FREE: ".",
    CellTag.OBSTACLE: "#",
    CellTag.START: "S",
    CellTag.GOAL: "G",
    CellTag.PATH: "*",
}

TAG_STYLES = {
    CellTag.FREE: "grey70",
    CellTag.OBSTACLE: "rgb(160,32,32)",
    CellTag.START: "bold rgb(32,255,32)",
    CellTag.GOAL: "bold rgb(0,0,255)",
    CellTag.PATH: "rgb(144,238,144)",
}

NEIGHBOR_STYLE = "reverse rgb(192,0,192)"


def render_grid_lines(
    grid: Grid,
    *,
    path: Iterable[Coord] = (),
    highlight: Coord | None = None,
) -> list[Text]:
    """One styled line per grid row.

    Path cells are drawn over free cells only, so start and goal keep their
    own tags. ``highlight`` marks the adjacency of that cell.
    """
    on_path = set(path)
    neighbors = set(grid.neighbors_of(*highlight)) if highlight is not None else set()

    lines: list[Text] = []
    for y in range(grid.height):
        line = Text()
        for x in range(grid.width):
            tag = grid.get_cell_value(x, y)
            if tag == CellTag.FREE and (x, y) in on_path:
                tag = CellTag.PATH
            style = NEIGHBOR_STYLE if (x, y) in neighbors else TAG_STYLES[tag]
            line.append(TAG_SYMBOLS[tag], style=style)
        lines.append(line)
    return lines


def render_search(
    grid: Grid,
    result: PathResult,
    *,
    start: Coord,
    goal: Coord,
    highlight: Coord | None = None,
) -> RenderableType:
    lines = render_grid_lines(grid, path=result.path, highlight=highlight)
    board = Text("\n").join(lines)
    summary = _render_summary(result, start=start, goal=goal)
    return Panel(Group(board, summary), title=f"Grid {grid.width}x{grid.height}")


def format_result(result: PathResult) -> str:
    if not result.found:
        return f"{result.status.value}: no path (expanded {result.expanded})"
    return (
        f"{result.status.value}: {len(result.path)} cells, "
        f"cost {result.cost:.2f} (expanded {result.expanded})"
    )


def _render_summary(result: PathResult, *, start: Coord, goal: Coord) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Start", _format_coord(start))
    table.add_row("Goal", _format_coord(goal))
    table.add_row("Status", result.status.value)
    table.add_row("Cost", f"{result.cost:.2f}" if result.cost is not None else "-")
    table.add_row("Steps", str(max(0, len(result.path) - 1)))
    table.add_row("Expanded", str(result.expanded))
    return table


def _format_coord(coord: Coord) -> str:
    return f"({coord[0]}, {coord[1]})"
