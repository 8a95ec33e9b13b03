"""Vertex record for the grid graph."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from gridpath.search.contracts import CellTag, Coord


@dataclass(eq=False)
class Cell:
    """One grid cell.

    ``neighbors`` and ``parent`` hold arena indices into the owning grid's
    ``cells`` list, never Cell objects. Score fields are only meaningful
    during and right after a search.
    """

    x: int
    y: int
    index: int
    is_obstacle: bool = False
    tag: CellTag = CellTag.FREE
    neighbors: set[int] = field(default_factory=set)
    local_score: float = math.inf
    global_score: float = math.inf
    parent: int | None = None

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def add_neighbor(self, other: Cell) -> None:
        if self.is_obstacle or other.is_obstacle:
            return
        self.neighbors.add(other.index)

    def reset_scores(self) -> None:
        self.local_score = math.inf
        self.global_score = math.inf
        self.parent = None

    def same_position(self, other: Cell) -> bool:
        return self.x == other.x and self.y == other.y
