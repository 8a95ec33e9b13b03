"""Errors raised by the grid search engine."""

from __future__ import annotations


class GridPathError(Exception):
    """Base class for every error raised by gridpath."""


class InvalidDimensions(GridPathError, ValueError):
    def __init__(self, width: object, height: object) -> None:
        super().__init__(
            f"Grid dimensions must be positive integers, got {width!r}x{height!r}."
        )
        self.width = width
        self.height = height


class OutOfBounds(GridPathError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Cell ({x}, {y}) is outside the {width}x{height} grid.")
        self.x = x
        self.y = y


class ObstacleEndpoint(GridPathError, ValueError):
    def __init__(self, x: int, y: int, role: str) -> None:
        super().__init__(f"Search {role} ({x}, {y}) is an obstacle.")
        self.x = x
        self.y = y
        self.role = role


class Empty(GridPathError, IndexError):
    """Pop or peek on an empty priority queue."""


class NotFound(GridPathError, KeyError):
    """decrease_key on a key with no live entry."""


class DuplicateKey(GridPathError, KeyError):
    """push on a key that already has a live entry."""


class MapFormatError(GridPathError, ValueError):
    """Malformed ASCII or JSON grid map."""
