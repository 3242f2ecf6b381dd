"""
Random player implementation - picks random safe moves.
"""

from domain.board_snapshot import BoardSnapshot
from .base import Player, safe_moves


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    name = "random"

    def get_move(self, snapshot: BoardSnapshot) -> str:
        valid_moves = safe_moves(snapshot)

        # No safe move: keep going, the game is lost anyway
        if not valid_moves:
            return snapshot.neck_direction

        return self.rng.choice(valid_moves)
