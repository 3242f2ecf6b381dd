"""
Grid entity - the single source of truth for cell occupancy.
"""

from typing import List, Optional

from .cell import Cell, CellContent, CellPosition
from .constants import GRID_SIZE
from .errors import OutOfBoundsError


class Grid:
    """
    A fixed size x size board. Each cell holds at most one content value
    (Food or SnakeBody) or is empty.

    Storage is column-major (cells[x][y]) so occupied cells come out
    ordered by x, then y.
    """

    def __init__(self, size: int = GRID_SIZE):
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.cells: List[List[Optional[CellContent]]] = [
            [None for _ in range(size)] for _ in range(size)
        ]

    @classmethod
    def new_empty_grid(cls, size: int = GRID_SIZE) -> "Grid":
        return cls(size)

    def _check(self, pos: CellPosition) -> None:
        if not pos.in_bounds(self.size):
            raise OutOfBoundsError(f"{pos} is outside the {self.size}x{self.size} grid")

    def get_cell_content(self, pos: CellPosition) -> Optional[CellContent]:
        self._check(pos)
        return self.cells[pos.x][pos.y]

    def is_cell_empty(self, pos: CellPosition) -> bool:
        return self.get_cell_content(pos) is None

    def set_cell(self, pos: CellPosition, content: CellContent) -> None:
        """Overwrite unconditionally. Callers check for collisions first."""
        self._check(pos)
        self.cells[pos.x][pos.y] = content

    def clear_cell(self, pos: CellPosition) -> None:
        self._check(pos)
        self.cells[pos.x][pos.y] = None

    def clear_grid(self) -> None:
        for column in self.cells:
            for y in range(self.size):
                column[y] = None

    def get_occupied_cells(self) -> List[Cell]:
        occupied: List[Cell] = []
        for x, column in enumerate(self.cells):
            for y, content in enumerate(column):
                if content is not None:
                    occupied.append(Cell(CellPosition(x, y), content))
        return occupied

    def get_empty_cells(self) -> List[CellPosition]:
        return [
            CellPosition(x, y)
            for x, column in enumerate(self.cells)
            for y, content in enumerate(column)
            if content is None
        ]

    def count_empty_cells(self) -> int:
        return sum(1 for column in self.cells for content in column if content is None)

    def __repr__(self):
        return f"<Grid size={self.size} occupied={len(self.get_occupied_cells())}>"
