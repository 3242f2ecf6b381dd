"""
BoardSnapshot entity - a read-only copy of the simulation at a point in time.
"""

from typing import Dict, List, Optional

from .cell import CellPosition


class BoardSnapshot:
    """
    A snapshot of the board between ticks.

    Attributes:
        grid_size: board edge length
        head, tail: positions of the snake's ends
        food: position of the food cell, if any
        body_ages: dict of position -> segment age (head has age 1)
        score, eaten_food, score_multiplier: scoring state
        state: "RUNNING", "WIN" or "LOSS"
        neck_direction: direction of the last head move
    """

    def __init__(
        self,
        grid_size: int,
        head: CellPosition,
        tail: CellPosition,
        food: Optional[CellPosition],
        body_ages: Dict[CellPosition, int],
        score: int,
        eaten_food: int,
        score_multiplier: int,
        state: str,
        neck_direction: str,
    ):
        self.grid_size = grid_size
        self.head = head
        self.tail = tail
        self.food = food
        self.body_ages = body_ages
        self.score = score
        self.eaten_food = eaten_food
        self.score_multiplier = score_multiplier
        self.state = state
        self.neck_direction = neck_direction

    def body_positions(self) -> List[CellPosition]:
        """Body segments ordered from head (youngest) to tail (oldest)."""
        return sorted(self.body_ages, key=lambda pos: self.body_ages[pos])

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        (0,0) is at bottom left, x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            board[self.food.y][self.food.x] = 'F'

        for pos in self.body_ages:
            board[pos.y][pos.x] = 'S'
        board[self.head.y][self.head.x] = 'H'

        result = []
        # Rows in reverse order (top row first)
        for y in range(self.grid_size - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Single digit labels keep columns aligned on wide boards
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<BoardSnapshot state={self.state}, head={self.head}, food={self.food}, "
            f"length={len(self.body_ages)}, score={self.score}>"
        )
