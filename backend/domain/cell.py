"""
Cell positions and cell contents.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union

from .constants import DIRECTION_VECTORS, GRID_SIZE


@dataclass(frozen=True)
class CellPosition:
    """
    An (x, y) coordinate on the board.

    Coordinates are never negative; the upper bound depends on the grid
    size, so it is checked with in_bounds() or by the Grid itself.
    """

    x: int
    y: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Cell position cannot be negative: ({self.x}, {self.y})")

    def in_bounds(self, grid_size: int = GRID_SIZE) -> bool:
        return self.x < grid_size and self.y < grid_size

    def neighbors(self, grid_size: int = GRID_SIZE) -> List["CellPosition"]:
        """
        Orthogonal neighbours inside the grid, in the fixed order
        left, right, down, up. No wraparound.
        """
        result: List[CellPosition] = []
        if self.x > 0:
            result.append(CellPosition(self.x - 1, self.y))
        if self.x < grid_size - 1:
            result.append(CellPosition(self.x + 1, self.y))
        if self.y > 0:
            result.append(CellPosition(self.x, self.y - 1))
        if self.y < grid_size - 1:
            result.append(CellPosition(self.x, self.y + 1))
        return result

    def moved(self, direction: str) -> Tuple[int, int]:
        """Raw coordinates one step away; may fall outside the board."""
        dx, dy = DIRECTION_VECTORS[direction]
        return self.x + dx, self.y + dy

    def is_adjacent(self, other: "CellPosition") -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) == 1

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    def __repr__(self):
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Food:
    pass


@dataclass(frozen=True)
class SnakeBody:
    """A body segment; age counts ticks since it was the head."""

    age: int


CellContent = Union[Food, SnakeBody]


@dataclass(frozen=True)
class Cell:
    position: CellPosition
    content: CellContent
