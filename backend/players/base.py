"""
Base player interface for automated direction sources.
"""

import random
from typing import List, Optional

from domain.board_snapshot import BoardSnapshot
from domain.cell import CellPosition
from domain.constants import OPPOSITE, VALID_MOVES


class Player:
    """
    Base class/interface for player logic.

    A player stands in for the keyboard: given a read-only snapshot of
    the board it returns the direction to queue for the next tick.
    """

    name = "base"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, snapshot: BoardSnapshot) -> str:
        """
        Return a move direction given the current board.

        Args:
            snapshot: Current state of the simulation

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError


def safe_moves(snapshot: BoardSnapshot) -> List[str]:
    """
    Directions that neither leave the board nor hit the body.

    The tail cell counts as body: the head moves before the tail
    retracts. The U-turn is left out because the engine ignores it.
    """
    moves: List[str] = []
    for move in sorted(VALID_MOVES):
        if move == OPPOSITE[snapshot.neck_direction]:
            continue
        x, y = snapshot.head.moved(move)
        if x < 0 or y < 0 or x >= snapshot.grid_size or y >= snapshot.grid_size:
            continue
        if CellPosition(x, y) in snapshot.body_ages:
            continue
        moves.append(move)
    return moves
