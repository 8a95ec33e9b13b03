"""Data contracts shared by the grid, the search and the presentation layer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

Coord = tuple[int, int]


class CellTag(str, Enum):
    FREE = "free"
    OBSTACLE = "obstacle"
    START = "start"
    GOAL = "goal"
    PATH = "path"


class SearchStatus(str, Enum):
    FOUND = "FOUND"
    UNREACHABLE = "UNREACHABLE"


class PathResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    status: SearchStatus
    path: list[Coord] = Field(default_factory=list)
    cost: float | None = None
    expanded: int = 0

    @model_validator(mode="after")
    def validate_result(self) -> "PathResult":
        if self.status == SearchStatus.FOUND:
            if not self.path or self.cost is None:
                raise ValueError("FOUND requires a path and a cost")
        elif self.path or self.cost is not None:
            raise ValueError("UNREACHABLE cannot include a path or cost")
        return self

    @property
    def found(self) -> bool:
        return self.status == SearchStatus.FOUND

    @classmethod
    def unreachable(cls, *, expanded: int = 0) -> "PathResult":
        return cls(status=SearchStatus.UNREACHABLE, expanded=expanded)
